"""Shared catalog header block (CatalogCommon).

Layout (little-endian):
    uint32  version
    uint32  name hash
    uint32  description hash
    uint32  price
    uint64  thumbnail hash
    uint32  dev category flags
    list    product styles (u8 count + TGI)
    version >= 10:  int16 pack id, uint8 pack options, 9 reserved bytes
    version <  10:  uint8 unused2, uint8 unused3 (only if unused2 > 0)
    list    tags (v11 encoding if version >= 11, legacy otherwise)
    list    selling points
    uint32  unlock-by hash
    uint32  unlocked-by hash
    uint16  swatch colors sort priority
    uint64  variant thumbnail image hash
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import TYPE_CHECKING

from s4catalog.const import (
    COMMON_DEFAULT_VERSION,
    COMMON_PACK_FIELDS_VERSION,
    COMMON_PACK_RESERVED_SIZE,
    COMMON_WIDE_TAGS_VERSION,
    DEFAULT_SWATCH_SORT_PRIORITY,
)
from s4catalog.io.reader import Reader
from s4catalog.model.lists import (
    SellingPoint,
    read_selling_points,
    read_tags,
    read_tgi_list,
    selling_points_size,
    tags_size,
    tgi_list_size,
    write_selling_points,
    write_tags,
    write_tgi_list,
)
from s4catalog.model.primitives import TgiReference

if TYPE_CHECKING:
    from s4catalog.io.writer import Writer


# version, name, description, price, thumbnail, dev category flags
FIXED_HEAD_SIZE = 28
# unlock-by, unlocked-by, sort priority, variant thumbnail
FIXED_TAIL_SIZE = 18


class PackDisplayOption(IntFlag):
    NONE = 0
    HIDE_PACK_ICON = 1


@dataclass
class CatalogCommon:
    """Versioned header block shared by most catalog resources."""

    version: int = COMMON_DEFAULT_VERSION  # uint32
    name_hash: int = 0  # uint32
    description_hash: int = 0  # uint32
    price: int = 0  # uint32
    thumbnail_hash: int = 0  # uint64
    dev_category_flags: int = 0  # uint32
    product_styles: list[TgiReference] = field(default_factory=list)
    pack_id: int = 0  # int16, version >= 10
    pack_options: PackDisplayOption = PackDisplayOption.NONE  # uint8, version >= 10
    reserved: bytes = bytes(COMMON_PACK_RESERVED_SIZE)  # version >= 10
    unused2: int = 1  # uint8, version < 10
    unused3: int = 0  # uint8, version < 10 and unused2 > 0
    tags: list[int] = field(default_factory=list)
    selling_points: list[SellingPoint] = field(default_factory=list)
    unlock_by_hash: int = 0  # uint32
    unlocked_by_hash: int = 0  # uint32
    swatch_colors_sort_priority: int = DEFAULT_SWATCH_SORT_PRIORITY  # uint16
    variant_thumb_image_hash: int = 0  # uint64

    @property
    def has_pack_fields(self) -> bool:
        return self.version >= COMMON_PACK_FIELDS_VERSION

    @property
    def has_wide_tags(self) -> bool:
        return self.version >= COMMON_WIDE_TAGS_VERSION

    @classmethod
    def read(cls, reader: Reader) -> CatalogCommon:
        """Read CatalogCommon from reader."""
        common = cls(
            version=reader.read_uint32(),
            name_hash=reader.read_uint32(),
            description_hash=reader.read_uint32(),
            price=reader.read_uint32(),
            thumbnail_hash=reader.read_uint64(),
            dev_category_flags=reader.read_uint32(),
        )
        common.product_styles = read_tgi_list(reader)

        if common.has_pack_fields:
            common.pack_id = reader.read_int16()
            common.pack_options = PackDisplayOption(reader.read_uint8())
            common.reserved = reader.read_bytes(COMMON_PACK_RESERVED_SIZE)
        else:
            common.unused2 = reader.read_uint8()
            if common.unused2 > 0:
                common.unused3 = reader.read_uint8()

        common.tags = read_tags(reader, wide=common.has_wide_tags)
        common.selling_points = read_selling_points(reader)
        common.unlock_by_hash = reader.read_uint32()
        common.unlocked_by_hash = reader.read_uint32()
        common.swatch_colors_sort_priority = reader.read_uint16()
        common.variant_thumb_image_hash = reader.read_uint64()
        return common

    def write(self, writer: Writer) -> None:
        """Write CatalogCommon to writer."""
        writer.write_uint32(self.version)
        writer.write_uint32(self.name_hash)
        writer.write_uint32(self.description_hash)
        writer.write_uint32(self.price)
        writer.write_uint64(self.thumbnail_hash)
        writer.write_uint32(self.dev_category_flags)
        write_tgi_list(writer, self.product_styles)

        if self.has_pack_fields:
            if len(self.reserved) != COMMON_PACK_RESERVED_SIZE:
                raise ValueError(f'Reserved pack block must be {COMMON_PACK_RESERVED_SIZE} bytes, got {len(self.reserved)}')
            writer.write_int16(self.pack_id)
            writer.write_uint8(self.pack_options)
            writer.write_bytes(self.reserved)
        else:
            writer.write_uint8(self.unused2)
            if self.unused2 > 0:
                writer.write_uint8(self.unused3)

        write_tags(writer, self.tags, wide=self.has_wide_tags)
        write_selling_points(writer, self.selling_points)
        writer.write_uint32(self.unlock_by_hash)
        writer.write_uint32(self.unlocked_by_hash)
        writer.write_uint16(self.swatch_colors_sort_priority)
        writer.write_uint64(self.variant_thumb_image_hash)

    @classmethod
    def parse(cls, data: bytes, offset: int = 0) -> tuple[CatalogCommon, int]:
        """Parse CatalogCommon from raw bytes, returning it and the bytes consumed."""
        reader = Reader(data, offset)
        common = cls.read(reader)
        return common, reader.position - offset

    def write_to(self, writer: Writer) -> int:
        """Write to writer and return the number of bytes written."""
        start = writer.position
        self.write(writer)
        return writer.position - start

    def serialized_size(self) -> int:
        """Exact number of bytes write_to() will produce."""
        size = FIXED_HEAD_SIZE + tgi_list_size(self.product_styles)
        if self.has_pack_fields:
            size += 2 + 1 + COMMON_PACK_RESERVED_SIZE
        else:
            size += 2 if self.unused2 > 0 else 1
        size += tags_size(self.tags, wide=self.has_wide_tags)
        size += selling_points_size(self.selling_points)
        return size + FIXED_TAIL_SIZE
