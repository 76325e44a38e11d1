"""Counted list codecs.

Every list starts with an unsigned element count. The count width and the
element encoding are fixed per call site, never inferred from the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from s4catalog.model.primitives import TgiReference

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer


COLOR_COUNT_WIDTH = 1
TGI_BYTE_COUNT_WIDTH = 1
SELLING_POINT_COUNT_WIDTH = 4
UINT32_LIST_COUNT_WIDTH = 2


# Colors (u8 count + ARGB u32)


def read_colors(reader: Reader) -> list[int]:
    """Read byte-counted list of packed ARGB colors."""
    count = reader.read_count(COLOR_COUNT_WIDTH)
    return [reader.read_uint32() for _ in range(count)]


def write_colors(writer: Writer, colors: list[int]) -> None:
    """Write byte-counted list of packed ARGB colors."""
    writer.write_count(COLOR_COUNT_WIDTH, len(colors))
    for color in colors:
        writer.write_uint32(color)


def colors_size(colors: list[int]) -> int:
    return COLOR_COUNT_WIDTH + 4 * len(colors)


# Selling points


@dataclass
class SellingPoint:
    """Commodity tag and amount pair (6 bytes)."""

    commodity: int  # uint16
    amount: int  # int32 in CatalogCommon, uint32 in object-style headers

    SIZE = 6


def read_selling_points(reader: Reader, signed: bool = True) -> list[SellingPoint]:
    """Read u32-counted selling point list."""
    count = reader.read_count(SELLING_POINT_COUNT_WIDTH)
    points = []
    for _ in range(count):
        commodity = reader.read_uint16()
        amount = reader.read_int32() if signed else reader.read_uint32()
        points.append(SellingPoint(commodity=commodity, amount=amount))
    return points


def write_selling_points(writer: Writer, points: list[SellingPoint], signed: bool = True) -> None:
    """Write u32-counted selling point list."""
    writer.write_count(SELLING_POINT_COUNT_WIDTH, len(points))
    for point in points:
        writer.write_uint16(point.commodity)
        if signed:
            writer.write_int32(point.amount)
        else:
            writer.write_uint32(point.amount)


def selling_points_size(points: list[SellingPoint]) -> int:
    return SELLING_POINT_COUNT_WIDTH + SellingPoint.SIZE * len(points)


# TGI references


def read_tgi_list(reader: Reader, count_width: int = TGI_BYTE_COUNT_WIDTH) -> list[TgiReference]:
    """Read counted list of TGI references (direct encoding)."""
    count = reader.read_count(count_width)
    return [TgiReference.read(reader) for _ in range(count)]


def write_tgi_list(writer: Writer, references: list[TgiReference], count_width: int = TGI_BYTE_COUNT_WIDTH) -> None:
    """Write counted list of TGI references (direct encoding)."""
    writer.write_count(count_width, len(references))
    for reference in references:
        reference.write(writer)


def tgi_list_size(references: list[TgiReference], count_width: int = TGI_BYTE_COUNT_WIDTH) -> int:
    return count_width + TgiReference.SIZE * len(references)


def read_tgi_array(reader: Reader, length: int) -> list[TgiReference]:
    """Read a fixed number of TGI references with no count prefix."""
    return [TgiReference.read(reader) for _ in range(length)]


def write_tgi_array(writer: Writer, references: list[TgiReference], length: int) -> None:
    """Write a fixed number of TGI references with no count prefix."""
    if len(references) != length:
        raise ValueError(f'Expected exactly {length} references, got {len(references)}')
    for reference in references:
        reference.write(writer)


# Catalog tags
#
# Two incompatible encodings, selected by the CatalogCommon version:
#   v11:    u32 count + u32 tags
#   legacy: u16 count + u16 tags


def read_tags_v11(reader: Reader) -> list[int]:
    count = reader.read_uint32()
    return [reader.read_uint32() for _ in range(count)]


def read_tags_legacy(reader: Reader) -> list[int]:
    count = reader.read_uint16()
    return [reader.read_uint16() for _ in range(count)]


def write_tags_v11(writer: Writer, tags: list[int]) -> None:
    writer.write_count(4, len(tags))
    for tag in tags:
        writer.write_uint32(tag)


def write_tags_legacy(writer: Writer, tags: list[int]) -> None:
    writer.write_count(2, len(tags))
    for tag in tags:
        writer.write_uint16(tag)


def read_tags(reader: Reader, wide: bool) -> list[int]:
    """Read tag list in the v11 (wide) or legacy encoding."""
    return read_tags_v11(reader) if wide else read_tags_legacy(reader)


def write_tags(writer: Writer, tags: list[int], wide: bool) -> None:
    """Write tag list in the v11 (wide) or legacy encoding."""
    if wide:
        write_tags_v11(writer, tags)
    else:
        write_tags_legacy(writer, tags)


def tags_size(tags: list[int], wide: bool) -> int:
    return 4 + 4 * len(tags) if wide else 2 + 2 * len(tags)


def read_object_tags(reader: Reader) -> list[int]:
    """Read the object-style tag list: u32 count + u16 tags."""
    count = reader.read_uint32()
    return [reader.read_uint16() for _ in range(count)]


def write_object_tags(writer: Writer, tags: list[int]) -> None:
    writer.write_count(4, len(tags))
    for tag in tags:
        writer.write_uint16(tag)


# Unknown u32 lists (u16 count + u32 values)


def read_uint32_list(reader: Reader) -> list[int]:
    count = reader.read_count(UINT32_LIST_COUNT_WIDTH)
    return [reader.read_uint32() for _ in range(count)]


def write_uint32_list(writer: Writer, values: list[int]) -> None:
    writer.write_count(UINT32_LIST_COUNT_WIDTH, len(values))
    for value in values:
        writer.write_uint32(value)
