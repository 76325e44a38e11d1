"""Build-mode catalog resources: fences, spandrels, walls, stairs, railings and friends.

All of them use the simple header (version + CatalogCommon) followed by
type-specific fields in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from s4catalog.const import (
    CBLK_EXTENDED_VERSION,
    CSTL_REFERENCE_COUNT,
    FNV_OFFSET_BASIS,
    TYPE_CBLK,
    TYPE_CFEN,
    TYPE_CFND,
    TYPE_CFRZ,
    TYPE_CRAL,
    TYPE_CSPN,
    TYPE_CSTL,
    TYPE_CSTR,
    TYPE_CWAL,
)
from s4catalog.model.lists import (
    read_colors,
    read_tgi_array,
    read_uint32_list,
    write_colors,
    write_tgi_array,
    write_uint32_list,
)
from s4catalog.model.primitives import TgiReference
from s4catalog.model.references import (
    CstrReferences,
    Gp4References,
    Gp7References,
    Gp8References,
    Gp9References,
    ModlEntry,
    WallImgGroup,
    WallMatdEntry,
    read_modl_entries,
    read_wall_img_groups,
    read_wall_matd_entries,
    write_modl_entries,
    write_wall_img_groups,
    write_wall_matd_entries,
)
from s4catalog.model.resource import CatalogResource
from s4catalog.model.shapes import SimpleCatalogHeader

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer
    from s4catalog.model.primitives import ResourceKey


@dataclass
class CfenResource(CatalogResource):
    """Fence: four MODL entry lists, seven references, a slot and three unknown lists."""

    TYPE_ID = TYPE_CFEN

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    modl_entries01: list[ModlEntry] = field(default_factory=list)
    modl_entries02: list[ModlEntry] = field(default_factory=list)
    modl_entries03: list[ModlEntry] = field(default_factory=list)
    modl_entries04: list[ModlEntry] = field(default_factory=list)
    references: Gp7References = field(default_factory=Gp7References)
    unk01: int = 0  # uint8
    unk02: int = 0  # uint32
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    slot: TgiReference = field(default_factory=TgiReference.empty)
    unk_list01: list[int] = field(default_factory=list)
    unk_list02: list[int] = field(default_factory=list)
    unk_list03: list[int] = field(default_factory=list)
    colors: list[int] = field(default_factory=list)
    unk04: int = 0  # uint32

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CfenResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            modl_entries01=read_modl_entries(reader),
            modl_entries02=read_modl_entries(reader),
            modl_entries03=read_modl_entries(reader),
            modl_entries04=read_modl_entries(reader),
            references=Gp7References.read(reader),
            unk01=reader.read_uint8(),
            unk02=reader.read_uint32(),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            slot=TgiReference.read(reader),
            unk_list01=read_uint32_list(reader),
            unk_list02=read_uint32_list(reader),
            unk_list03=read_uint32_list(reader),
            colors=read_colors(reader),
            unk04=reader.read_uint32(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        write_modl_entries(writer, self.modl_entries01)
        write_modl_entries(writer, self.modl_entries02)
        write_modl_entries(writer, self.modl_entries03)
        write_modl_entries(writer, self.modl_entries04)
        self.references.write(writer)
        writer.write_uint8(self.unk01)
        writer.write_uint32(self.unk02)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        self.slot.write(writer)
        write_uint32_list(writer, self.unk_list01)
        write_uint32_list(writer, self.unk_list02)
        write_uint32_list(writer, self.unk_list03)
        write_colors(writer, self.colors)
        writer.write_uint32(self.unk04)


@dataclass
class CspnResource(CatalogResource):
    """Spandrel: four MODL entry lists and seven references."""

    TYPE_ID = TYPE_CSPN

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    modl_entries01: list[ModlEntry] = field(default_factory=list)
    modl_entries02: list[ModlEntry] = field(default_factory=list)
    modl_entries03: list[ModlEntry] = field(default_factory=list)
    modl_entries04: list[ModlEntry] = field(default_factory=list)
    references: Gp7References = field(default_factory=Gp7References)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CspnResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            modl_entries01=read_modl_entries(reader),
            modl_entries02=read_modl_entries(reader),
            modl_entries03=read_modl_entries(reader),
            modl_entries04=read_modl_entries(reader),
            references=Gp7References.read(reader),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        write_modl_entries(writer, self.modl_entries01)
        write_modl_entries(writer, self.modl_entries02)
        write_modl_entries(writer, self.modl_entries03)
        write_modl_entries(writer, self.modl_entries04)
        self.references.write(writer)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CwalResource(CatalogResource):
    """Wall: material definitions per wall height and corner image groups."""

    TYPE_ID = TYPE_CWAL

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    matd_entries: list[WallMatdEntry] = field(default_factory=list)
    img_groups: list[WallImgGroup] = field(default_factory=list)
    cornering_factor: int = 0  # uint32
    colors: list[int] = field(default_factory=list)
    swatch_grouping: int = 0  # uint64

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CwalResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            matd_entries=read_wall_matd_entries(reader),
            img_groups=read_wall_img_groups(reader),
            cornering_factor=reader.read_uint32(),
            colors=read_colors(reader),
            swatch_grouping=reader.read_uint64(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        write_wall_matd_entries(writer, self.matd_entries)
        write_wall_img_groups(writer, self.img_groups)
        writer.write_uint32(self.cornering_factor)
        write_colors(writer, self.colors)
        writer.write_uint64(self.swatch_grouping)


@dataclass
class CstrResource(CatalogResource):
    """Stairs: hashed material set and six references."""

    TYPE_ID = TYPE_CSTR

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    hash_indicator: int = 1  # uint8
    hash01: int = FNV_OFFSET_BASIS  # uint32
    hash02: int = FNV_OFFSET_BASIS  # uint32
    hash03: int = FNV_OFFSET_BASIS  # uint32
    references: CstrReferences = field(default_factory=CstrReferences)
    unk01: int = 0  # uint8
    unk02: int = 0  # uint8
    unk03: int = 0  # uint8
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)
    unk05: int = 0  # uint8

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CstrResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            hash_indicator=reader.read_uint8(),
            hash01=reader.read_uint32(),
            hash02=reader.read_uint32(),
            hash03=reader.read_uint32(),
            references=CstrReferences.read(reader),
            unk01=reader.read_uint8(),
            unk02=reader.read_uint8(),
            unk03=reader.read_uint8(),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
            unk05=reader.read_uint8(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        writer.write_uint8(self.hash_indicator)
        writer.write_uint32(self.hash01)
        writer.write_uint32(self.hash02)
        writer.write_uint32(self.hash03)
        self.references.write(writer)
        writer.write_uint8(self.unk01)
        writer.write_uint8(self.unk02)
        writer.write_uint8(self.unk03)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)
        writer.write_uint8(self.unk05)


def _empty_stair_references() -> list[TgiReference]:
    return [TgiReference.empty() for _ in range(CSTL_REFERENCE_COUNT)]


@dataclass
class CstlResource(CatalogResource):
    """Stair style: exactly 25 references, addressed by index."""

    TYPE_ID = TYPE_CSTL

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: list[TgiReference] = field(default_factory=_empty_stair_references)
    unk01: int = 0  # uint32
    unk02: int = 0  # uint32
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)
    unk03: int = 0  # uint32

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CstlResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            references=read_tgi_array(reader, CSTL_REFERENCE_COUNT),
            unk01=reader.read_uint32(),
            unk02=reader.read_uint32(),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
            unk03=reader.read_uint32(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        write_tgi_array(writer, self.references, CSTL_REFERENCE_COUNT)
        writer.write_uint32(self.unk01)
        writer.write_uint32(self.unk02)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)
        writer.write_uint32(self.unk03)


@dataclass
class CralResource(CatalogResource):
    """Railing."""

    TYPE_ID = TYPE_CRAL

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: Gp8References = field(default_factory=Gp8References)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CralResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            references=Gp8References.read(reader),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.references.write(writer)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CfrzResource(CatalogResource):
    """Frieze.

    ``references_indicator`` selects which of the two reference blocks is
    stored: 1 means trim_references, anything else means model_references.
    Only the selected block is read or written; after decode the other one
    is None.
    """

    TYPE_ID = TYPE_CFRZ

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references_indicator: int = 0  # uint8
    trim_references: Gp4References | None = None
    model_references: Gp8References | None = field(default_factory=Gp8References)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @property
    def uses_trim_references(self) -> bool:
        return self.references_indicator == 1

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CfrzResource:
        resource = cls(key=key, header=SimpleCatalogHeader.read(reader), model_references=None)
        resource.references_indicator = reader.read_uint8()
        if resource.uses_trim_references:
            resource.trim_references = Gp4References.read(reader)
        else:
            resource.model_references = Gp8References.read(reader)
        resource.material_variant = reader.read_uint32()
        resource.swatch_grouping = reader.read_uint64()
        resource.colors = read_colors(reader)
        return resource

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        writer.write_uint8(self.references_indicator)
        if self.uses_trim_references:
            (self.trim_references or Gp4References()).write(writer)
        else:
            (self.model_references or Gp8References()).write(writer)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CfndResource(CatalogResource):
    """Foundation."""

    TYPE_ID = TYPE_CFND

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: Gp9References = field(default_factory=Gp9References)
    unk01: int = 0  # uint8
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CfndResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            references=Gp9References.read(reader),
            unk01=reader.read_uint8(),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.references.write(writer)
        writer.write_uint8(self.unk01)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CblkResource(CatalogResource):
    """Building block. Versions 0x0A and later carry an extra unknown block."""

    TYPE_ID = TYPE_CBLK

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: Gp9References = field(default_factory=Gp9References)
    unk02: int = 0  # uint32, version >= 0x0A
    unk_list: list[int] = field(default_factory=list)  # version >= 0x0A
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @property
    def has_extended_block(self) -> bool:
        return self.header.version >= CBLK_EXTENDED_VERSION

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CblkResource:
        resource = cls(key=key, header=SimpleCatalogHeader.read(reader))
        resource.references = Gp9References.read(reader)
        if resource.has_extended_block:
            resource.unk02 = reader.read_uint32()
            resource.unk_list = read_uint32_list(reader)
        resource.material_variant = reader.read_uint32()
        resource.swatch_grouping = reader.read_uint64()
        resource.colors = read_colors(reader)
        return resource

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.references.write(writer)
        if self.has_extended_block:
            writer.write_uint32(self.unk02)
            write_uint32_list(writer, self.unk_list)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)
