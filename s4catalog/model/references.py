"""Fixed reference bundles and small entry lists used by building resources.

Bundle slots are addressed by name (ref01, ref02, ...) because each slot has
its own meaning in the game; they are written in field order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar

from s4catalog.model.primitives import TgiReference

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer


ENTRY_COUNT_WIDTH = 1

B = TypeVar('B', bound='ReferenceBundle')


def _empty_reference() -> Any:
    return field(default_factory=TgiReference.empty)


class ReferenceBundle:
    """Mixin for dataclasses made only of TgiReference fields."""

    @classmethod
    def read(cls: type[B], reader: Reader) -> B:
        return cls(*[TgiReference.read(reader) for _ in fields(cls)])

    def write(self, writer: Writer) -> None:
        for slot in fields(self):
            getattr(self, slot.name).write(writer)

    @classmethod
    def size(cls) -> int:
        return TgiReference.SIZE * len(fields(cls))


@dataclass
class Gp4References(ReferenceBundle):
    ref01: TgiReference = _empty_reference()
    ref02: TgiReference = _empty_reference()
    ref03: TgiReference = _empty_reference()
    ref04: TgiReference = _empty_reference()


@dataclass
class CstrReferences(ReferenceBundle):
    ref01: TgiReference = _empty_reference()
    ref02: TgiReference = _empty_reference()
    ref03: TgiReference = _empty_reference()
    ref04: TgiReference = _empty_reference()
    ref05: TgiReference = _empty_reference()
    ref06: TgiReference = _empty_reference()


@dataclass
class Gp7References(ReferenceBundle):
    ref01: TgiReference = _empty_reference()
    ref02: TgiReference = _empty_reference()
    ref03: TgiReference = _empty_reference()
    ref04: TgiReference = _empty_reference()
    ref05: TgiReference = _empty_reference()
    ref06: TgiReference = _empty_reference()
    ref07: TgiReference = _empty_reference()


@dataclass
class Gp8References(ReferenceBundle):
    ref01: TgiReference = _empty_reference()
    ref02: TgiReference = _empty_reference()
    ref03: TgiReference = _empty_reference()
    ref04: TgiReference = _empty_reference()
    ref05: TgiReference = _empty_reference()
    ref06: TgiReference = _empty_reference()
    ref07: TgiReference = _empty_reference()
    ref08: TgiReference = _empty_reference()


@dataclass
class Gp9References(ReferenceBundle):
    ref01: TgiReference = _empty_reference()
    ref02: TgiReference = _empty_reference()
    ref03: TgiReference = _empty_reference()
    ref04: TgiReference = _empty_reference()
    ref05: TgiReference = _empty_reference()
    ref06: TgiReference = _empty_reference()
    ref07: TgiReference = _empty_reference()
    ref08: TgiReference = _empty_reference()
    ref09: TgiReference = _empty_reference()


# MODL entries (spandrels, fences)


@dataclass
class ModlEntry:
    """Labelled model reference (18 bytes)."""

    label: int = 0  # uint16
    reference: TgiReference = _empty_reference()

    SIZE = 18

    @classmethod
    def read(cls, reader: Reader) -> ModlEntry:
        label = reader.read_uint16()
        return cls(label=label, reference=TgiReference.read(reader))

    def write(self, writer: Writer) -> None:
        writer.write_uint16(self.label)
        self.reference.write(writer)


def read_modl_entries(reader: Reader) -> list[ModlEntry]:
    count = reader.read_count(ENTRY_COUNT_WIDTH)
    return [ModlEntry.read(reader) for _ in range(count)]


def write_modl_entries(writer: Writer, entries: list[ModlEntry]) -> None:
    writer.write_count(ENTRY_COUNT_WIDTH, len(entries))
    for entry in entries:
        entry.write(writer)


# Walls


class MainWallHeight(IntEnum):
    SHORT = 3
    MEDIUM = 4
    TALL = 5


class CornerWallHeight(IntEnum):
    SHORT = 0xC3
    MEDIUM = 0xC4
    TALL = 0xC5


@dataclass
class WallMatdEntry:
    """Wall material definition for one wall height (17 bytes)."""

    height: int = MainWallHeight.SHORT  # uint8
    reference: TgiReference = _empty_reference()

    SIZE = 17

    @classmethod
    def read(cls, reader: Reader) -> WallMatdEntry:
        height = reader.read_uint8()
        return cls(height=height, reference=TgiReference.read(reader))

    def write(self, writer: Writer) -> None:
        writer.write_uint8(self.height)
        self.reference.write(writer)


@dataclass
class WallImgGroup:
    """Corner texture set for one wall height (49 bytes)."""

    height: int = CornerWallHeight.SHORT  # uint8
    diffuse: TgiReference = _empty_reference()
    bump: TgiReference = _empty_reference()
    specular: TgiReference = _empty_reference()

    SIZE = 49

    @classmethod
    def read(cls, reader: Reader) -> WallImgGroup:
        height = reader.read_uint8()
        diffuse = TgiReference.read(reader)
        bump = TgiReference.read(reader)
        specular = TgiReference.read(reader)
        return cls(height=height, diffuse=diffuse, bump=bump, specular=specular)

    def write(self, writer: Writer) -> None:
        writer.write_uint8(self.height)
        self.diffuse.write(writer)
        self.bump.write(writer)
        self.specular.write(writer)


def read_wall_matd_entries(reader: Reader) -> list[WallMatdEntry]:
    count = reader.read_count(ENTRY_COUNT_WIDTH)
    return [WallMatdEntry.read(reader) for _ in range(count)]


def write_wall_matd_entries(writer: Writer, entries: list[WallMatdEntry]) -> None:
    writer.write_count(ENTRY_COUNT_WIDTH, len(entries))
    for entry in entries:
        entry.write(writer)


def read_wall_img_groups(reader: Reader) -> list[WallImgGroup]:
    count = reader.read_count(ENTRY_COUNT_WIDTH)
    return [WallImgGroup.read(reader) for _ in range(count)]


def write_wall_img_groups(writer: Writer, groups: list[WallImgGroup]) -> None:
    writer.write_count(ENTRY_COUNT_WIDTH, len(groups))
    for group in groups:
        group.write(writer)
