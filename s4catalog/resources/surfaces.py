"""Floor, terrain, roof and trim catalog resources on the simple header."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from s4catalog.const import (
    CTPT_DEFAULT_VERSION,
    FNV_OFFSET_BASIS,
    TYPE_CFLR,
    TYPE_CFLT,
    TYPE_CFTR,
    TYPE_CPLT,
    TYPE_CRPT,
    TYPE_CRTR,
    TYPE_CTPT,
    TYPE_STRM,
)
from s4catalog.model.lists import (
    read_colors,
    read_tgi_list,
    read_uint32_list,
    write_colors,
    write_tgi_list,
    write_uint32_list,
)
from s4catalog.model.primitives import TgiReference
from s4catalog.model.references import Gp4References, Gp8References
from s4catalog.model.resource import CatalogResource
from s4catalog.model.shapes import SimpleCatalogHeader

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer
    from s4catalog.model.primitives import ResourceKey


# Terrain paint materials use a u32 count, unlike most TGI lists
CTPT_MATERIAL_COUNT_WIDTH = 4


def _terrain_paint_header() -> SimpleCatalogHeader:
    return SimpleCatalogHeader(version=CTPT_DEFAULT_VERSION)


@dataclass
class CtptResource(CatalogResource):
    """Terrain paint."""

    TYPE_ID = TYPE_CTPT

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=_terrain_paint_header)
    hash_indicator: int = 1  # uint8
    hash01: int = FNV_OFFSET_BASIS  # uint32
    hash02: int = FNV_OFFSET_BASIS  # uint32
    hash03: int = FNV_OFFSET_BASIS  # uint32
    materials: list[TgiReference] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CtptResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            hash_indicator=reader.read_uint8(),
            hash01=reader.read_uint32(),
            hash02=reader.read_uint32(),
            hash03=reader.read_uint32(),
            materials=read_tgi_list(reader, CTPT_MATERIAL_COUNT_WIDTH),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        writer.write_uint8(self.hash_indicator)
        writer.write_uint32(self.hash01)
        writer.write_uint32(self.hash02)
        writer.write_uint32(self.hash03)
        write_tgi_list(writer, self.materials, CTPT_MATERIAL_COUNT_WIDTH)


@dataclass
class CflrResource(CatalogResource):
    """Floor."""

    TYPE_ID = TYPE_CFLR

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    hash_indicator: int = 1  # uint8
    hash01: int = FNV_OFFSET_BASIS  # uint32
    hash02: int = FNV_OFFSET_BASIS  # uint32
    hash03: int = FNV_OFFSET_BASIS  # uint32
    materials: list[TgiReference] = field(default_factory=list)
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CflrResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            hash_indicator=reader.read_uint8(),
            hash01=reader.read_uint32(),
            hash02=reader.read_uint32(),
            hash03=reader.read_uint32(),
            materials=read_tgi_list(reader),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        writer.write_uint8(self.hash_indicator)
        writer.write_uint32(self.hash01)
        writer.write_uint32(self.hash02)
        writer.write_uint32(self.hash03)
        write_tgi_list(writer, self.materials)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CrptResource(CatalogResource):
    """Roof pattern."""

    TYPE_ID = TYPE_CRPT

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    hash_indicator: int = 1  # uint8
    hash01: int = FNV_OFFSET_BASIS  # uint32
    hash02: int = FNV_OFFSET_BASIS  # uint32
    hash03: int = FNV_OFFSET_BASIS  # uint32
    material: TgiReference = field(default_factory=TgiReference.empty)
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CrptResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            hash_indicator=reader.read_uint8(),
            hash01=reader.read_uint32(),
            hash02=reader.read_uint32(),
            hash03=reader.read_uint32(),
            material=TgiReference.read(reader),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        writer.write_uint8(self.hash_indicator)
        writer.write_uint32(self.hash01)
        writer.write_uint32(self.hash02)
        writer.write_uint32(self.hash03)
        self.material.write(writer)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CfltResource(CatalogResource):
    """Floor trim."""

    TYPE_ID = TYPE_CFLT

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    hash_indicator: int = 1  # uint8
    hash01: int = FNV_OFFSET_BASIS  # uint32
    hash02: int = FNV_OFFSET_BASIS  # uint32
    hash03: int = FNV_OFFSET_BASIS  # uint32
    model: TgiReference = field(default_factory=TgiReference.empty)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CfltResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            hash_indicator=reader.read_uint8(),
            hash01=reader.read_uint32(),
            hash02=reader.read_uint32(),
            hash03=reader.read_uint32(),
            model=TgiReference.read(reader),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        writer.write_uint8(self.hash_indicator)
        writer.write_uint32(self.hash01)
        writer.write_uint32(self.hash02)
        writer.write_uint32(self.hash03)
        self.model.write(writer)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)


@dataclass
class CftrResource(CatalogResource):
    """Ceiling trim."""

    TYPE_ID = TYPE_CFTR

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: Gp4References = field(default_factory=Gp4References)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)
    unk01: int = 0  # uint32

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CftrResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            references=Gp4References.read(reader),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
            unk01=reader.read_uint32(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.references.write(writer)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)
        writer.write_uint32(self.unk01)


@dataclass
class CpltResource(CatalogResource):
    """Pool trim."""

    TYPE_ID = TYPE_CPLT

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: Gp4References = field(default_factory=Gp4References)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)
    unk01: int = 0  # uint8

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CpltResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            references=Gp4References.read(reader),
            material_variant=reader.read_uint32(),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
            unk01=reader.read_uint8(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.references.write(writer)
        writer.write_uint32(self.material_variant)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)
        writer.write_uint8(self.unk01)


@dataclass
class CrtrResource(CatalogResource):
    """Roof trim."""

    TYPE_ID = TYPE_CRTR

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    references: Gp8References = field(default_factory=Gp8References)
    material_variant: int = 0  # uint32
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CrtrResource:
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
class StrmResource(CatalogResource):
    TYPE_ID = TYPE_STRM

    key: ResourceKey
    header: SimpleCatalogHeader = field(default_factory=SimpleCatalogHeader)
    model: TgiReference = field(default_factory=TgiReference.empty)
    unk_list: list[int] = field(default_factory=list)
    swatch_grouping: int = 0  # uint64
    colors: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> StrmResource:
        return cls(
            key=key,
            header=SimpleCatalogHeader.read(reader),
            model=TgiReference.read(reader),
            unk_list=read_uint32_list(reader),
            swatch_grouping=reader.read_uint64(),
            colors=read_colors(reader),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.model.write(writer)
        write_uint32_list(writer, self.unk_list)
        writer.write_uint64(self.swatch_grouping)
        write_colors(writer, self.colors)
