"""Catalog resources that use the older object-style header."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from s4catalog.const import (
    C48C28979_DATA_BLOB1_SIZE,
    C48C28979_DATA_BLOB2_SIZE,
    C48C28979_DATA_BLOB2_VERSION,
    TYPE_A8F7B517,
    TYPE_C48C28979,
    TYPE_ROOF_STYLE,
)
from s4catalog.model.primitives import TgiReference
from s4catalog.model.references import Gp4References
from s4catalog.model.resource import CatalogResource
from s4catalog.model.shapes import ObjectCatalogHeader

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer
    from s4catalog.model.primitives import ResourceKey


def _check_blob(name: str, blob: bytes, size: int) -> None:
    if len(blob) != size:
        raise ValueError(f'{name} must be exactly {size} bytes, got {len(blob)}')


@dataclass
class C48c28979CatalogResource(CatalogResource):
    """Object-style catalog entry with two opaque data blobs.

    data_blob2 is only present from header version 0x19; below that it is
    neither read nor written.
    """

    TYPE_ID = TYPE_C48C28979

    key: ResourceKey
    header: ObjectCatalogHeader = field(default_factory=ObjectCatalogHeader)
    unknown1: int = 0  # uint32
    unknown2: int = 0  # uint32
    unknown3: int = 0  # uint32
    unknown4: int = 0  # uint32
    unknown5: int = 0  # uint32
    unknown6: int = 0  # uint32
    unknown7: int = 0  # uint32
    data_blob1: bytes = bytes(C48C28979_DATA_BLOB1_SIZE)
    unknown8: int = 0  # uint64
    unknown9: int = 0  # uint32
    unknown10: int = 0  # uint32
    data_blob2: bytes = bytes(C48C28979_DATA_BLOB2_SIZE)  # version >= 0x19
    unknown11: int = 0  # uint32

    @property
    def has_data_blob2(self) -> bool:
        return self.header.version >= C48C28979_DATA_BLOB2_VERSION

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> C48c28979CatalogResource:
        resource = cls(
            key=key,
            header=ObjectCatalogHeader.read(reader),
            unknown1=reader.read_uint32(),
            unknown2=reader.read_uint32(),
            unknown3=reader.read_uint32(),
            unknown4=reader.read_uint32(),
            unknown5=reader.read_uint32(),
            unknown6=reader.read_uint32(),
            unknown7=reader.read_uint32(),
            data_blob1=reader.read_bytes(C48C28979_DATA_BLOB1_SIZE),
            unknown8=reader.read_uint64(),
            unknown9=reader.read_uint32(),
            unknown10=reader.read_uint32(),
        )
        if resource.has_data_blob2:
            resource.data_blob2 = reader.read_bytes(C48C28979_DATA_BLOB2_SIZE)
        resource.unknown11 = reader.read_uint32()
        return resource

    def write(self, writer: Writer) -> None:
        _check_blob('data_blob1', self.data_blob1, C48C28979_DATA_BLOB1_SIZE)
        self.header.write(writer)
        writer.write_uint32(self.unknown1)
        writer.write_uint32(self.unknown2)
        writer.write_uint32(self.unknown3)
        writer.write_uint32(self.unknown4)
        writer.write_uint32(self.unknown5)
        writer.write_uint32(self.unknown6)
        writer.write_uint32(self.unknown7)
        writer.write_bytes(self.data_blob1)
        writer.write_uint64(self.unknown8)
        writer.write_uint32(self.unknown9)
        writer.write_uint32(self.unknown10)
        if self.has_data_blob2:
            _check_blob('data_blob2', self.data_blob2, C48C28979_DATA_BLOB2_SIZE)
            writer.write_bytes(self.data_blob2)
        writer.write_uint32(self.unknown11)


@dataclass
class A8f7b517CatalogResource(CatalogResource):
    TYPE_ID = TYPE_A8F7B517

    key: ResourceKey
    header: ObjectCatalogHeader = field(default_factory=ObjectCatalogHeader)
    references: Gp4References = field(default_factory=Gp4References)
    unknown8: int = 0  # uint32

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> A8f7b517CatalogResource:
        return cls(
            key=key,
            header=ObjectCatalogHeader.read(reader),
            references=Gp4References.read(reader),
            unknown8=reader.read_uint32(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.references.write(writer)
        writer.write_uint32(self.unknown8)


@dataclass
class RoofStyleResource(CatalogResource):
    """Roof style: material reference and roof geometry parameters."""

    TYPE_ID = TYPE_ROOF_STYLE

    key: ResourceKey
    header: ObjectCatalogHeader = field(default_factory=ObjectCatalogHeader)
    roof_material: TgiReference = field(default_factory=TgiReference.empty)
    unknown8: int = 0  # uint32
    pitch: float = 0.0  # float32
    overhang: float = 0.0  # float32

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> RoofStyleResource:
        return cls(
            key=key,
            header=ObjectCatalogHeader.read(reader),
            roof_material=TgiReference.read(reader),
            unknown8=reader.read_uint32(),
            pitch=reader.read_float(),
            overhang=reader.read_float(),
        )

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
        self.roof_material.write(writer)
        writer.write_uint32(self.unknown8)
        writer.write_float(self.pitch)
        writer.write_float(self.overhang)
