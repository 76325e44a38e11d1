"""Base header shapes that concrete catalog resources are built from.

A concrete resource holds exactly one of these as its ``header`` and appends
its own fields after it. Shapes are never subclassed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from s4catalog.const import (
    ABSTRACT_DEFAULT_VERSION,
    ABSTRACT_FALLBACK_KEY_VERSION,
    ABSTRACT_MAX_AURAL_PROPERTIES_VERSION,
    DEFAULT_AURAL_MATERIALS_VERSION,
    DEFAULT_AURAL_PROPERTIES_VERSION,
    FNV_OFFSET_BASIS,
    OBJECT_DEFAULT_CATALOG_VERSION,
    OBJECT_DEFAULT_VERSION,
    SIMPLE_DEFAULT_VERSION,
)
from s4catalog.errors import UnsupportedVersion
from s4catalog.model.common import CatalogCommon
from s4catalog.model.lists import (
    SellingPoint,
    read_colors,
    read_object_tags,
    read_selling_points,
    read_tgi_list,
    write_colors,
    write_object_tags,
    write_selling_points,
    write_tgi_list,
)
from s4catalog.model.primitives import TgiReference

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer


@dataclass
class SimpleCatalogHeader:
    """Version followed by CatalogCommon."""

    version: int = SIMPLE_DEFAULT_VERSION  # uint32
    common: CatalogCommon = field(default_factory=CatalogCommon)

    @classmethod
    def read(cls, reader: Reader) -> SimpleCatalogHeader:
        version = reader.read_uint32()
        common = CatalogCommon.read(reader)
        return cls(version=version, common=common)

    def write(self, writer: Writer) -> None:
        writer.write_uint32(self.version)
        self.common.write(writer)


@dataclass
class AbstractCatalogHeader:
    """Header of placeable objects: CatalogCommon plus aural, placement and slot data.

    Aural properties fields by aural_properties_version:
        1       quality
        2       quality, ambient object
        3       quality, ambient object, ambience file instance, override flag
        4       quality, ambient object, unknown01

    The fallback object key exists only from version 0x19.
    """

    version: int = ABSTRACT_DEFAULT_VERSION  # uint32
    common: CatalogCommon = field(default_factory=CatalogCommon)

    aural_materials_version: int = DEFAULT_AURAL_MATERIALS_VERSION  # uint32
    aural_materials1: int = FNV_OFFSET_BASIS  # uint32
    aural_materials2: int = FNV_OFFSET_BASIS  # uint32
    aural_materials3: int = FNV_OFFSET_BASIS  # uint32

    aural_properties_version: int = DEFAULT_AURAL_PROPERTIES_VERSION  # uint32
    aural_quality: int = FNV_OFFSET_BASIS  # uint32
    aural_ambient_object: int = FNV_OFFSET_BASIS  # uint32, aural v2+
    ambience_file_instance_id: int = 0  # uint64, aural v3
    is_override_ambience: int = 0  # uint8, aural v3
    unknown01: int = 0  # uint8, aural v4

    unused0: int = 0  # uint32
    unused1: int = 0  # uint32
    unused2: int = 0  # uint32
    placement_flags_high: int = 0  # uint32
    placement_flags_low: int = 0  # uint32
    slot_type_set: int = 0  # uint64
    slot_deco_size: int = 0  # uint8
    catalog_group: int = 0  # uint64
    state_usage: int = 0  # uint8
    colors: list[int] = field(default_factory=list)
    fence_height: int = 0  # uint32
    is_stackable: int = 0  # uint8
    can_item_depreciate: int = 0  # uint8
    fallback_object_key: TgiReference = field(default_factory=TgiReference.empty)  # version >= 0x19

    @property
    def has_fallback_object_key(self) -> bool:
        return self.version >= ABSTRACT_FALLBACK_KEY_VERSION

    @classmethod
    def read(cls, reader: Reader) -> AbstractCatalogHeader:
        header = cls(version=reader.read_uint32(), common=CatalogCommon.read(reader))

        header.aural_materials_version = reader.read_uint32()
        header.aural_materials1 = reader.read_uint32()
        header.aural_materials2 = reader.read_uint32()
        header.aural_materials3 = reader.read_uint32()

        header.aural_properties_version = reader.read_uint32()
        if header.aural_properties_version > ABSTRACT_MAX_AURAL_PROPERTIES_VERSION:
            raise UnsupportedVersion(
                'aural properties', header.aural_properties_version, ABSTRACT_MAX_AURAL_PROPERTIES_VERSION
            )
        header.aural_quality = reader.read_uint32()
        if header.aural_properties_version > 1:
            header.aural_ambient_object = reader.read_uint32()
        if header.aural_properties_version == 3:
            header.ambience_file_instance_id = reader.read_uint64()
            header.is_override_ambience = reader.read_uint8()
        if header.aural_properties_version == 4:
            header.unknown01 = reader.read_uint8()

        header.unused0 = reader.read_uint32()
        header.unused1 = reader.read_uint32()
        header.unused2 = reader.read_uint32()
        header.placement_flags_high = reader.read_uint32()
        header.placement_flags_low = reader.read_uint32()
        header.slot_type_set = reader.read_uint64()
        header.slot_deco_size = reader.read_uint8()
        header.catalog_group = reader.read_uint64()
        header.state_usage = reader.read_uint8()
        header.colors = read_colors(reader)
        header.fence_height = reader.read_uint32()
        header.is_stackable = reader.read_uint8()
        header.can_item_depreciate = reader.read_uint8()

        if header.has_fallback_object_key:
            header.fallback_object_key = TgiReference.read(reader)
        return header

    def write(self, writer: Writer) -> None:
        writer.write_uint32(self.version)
        self.common.write(writer)

        writer.write_uint32(self.aural_materials_version)
        writer.write_uint32(self.aural_materials1)
        writer.write_uint32(self.aural_materials2)
        writer.write_uint32(self.aural_materials3)

        writer.write_uint32(self.aural_properties_version)
        writer.write_uint32(self.aural_quality)
        if self.aural_properties_version > 1:
            writer.write_uint32(self.aural_ambient_object)
        if self.aural_properties_version == 3:
            writer.write_uint64(self.ambience_file_instance_id)
            writer.write_uint8(self.is_override_ambience)
        if self.aural_properties_version == 4:
            writer.write_uint8(self.unknown01)

        writer.write_uint32(self.unused0)
        writer.write_uint32(self.unused1)
        writer.write_uint32(self.unused2)
        writer.write_uint32(self.placement_flags_high)
        writer.write_uint32(self.placement_flags_low)
        writer.write_uint64(self.slot_type_set)
        writer.write_uint8(self.slot_deco_size)
        writer.write_uint64(self.catalog_group)
        writer.write_uint8(self.state_usage)
        write_colors(writer, self.colors)
        writer.write_uint32(self.fence_height)
        writer.write_uint8(self.is_stackable)
        writer.write_uint8(self.can_item_depreciate)

        if self.has_fallback_object_key:
            self.fallback_object_key.write(writer)


@dataclass
class ObjectCatalogHeader:
    """Older object-style header with its own hash and price fields."""

    version: int = OBJECT_DEFAULT_VERSION  # uint32
    catalog_version: int = OBJECT_DEFAULT_CATALOG_VERSION  # uint32
    name_hash: int = 0  # uint32
    desc_hash: int = 0  # uint32
    price: int = 0  # uint32
    unknown1: int = 0  # uint32
    unknown2: int = 0  # uint32
    unknown3: int = 0  # uint32
    style_references: list[TgiReference] = field(default_factory=list)
    unknown4: int = 0  # uint16
    tags: list[int] = field(default_factory=list)
    selling_points: list[SellingPoint] = field(default_factory=list)
    unknown5: int = 0  # uint64
    unknown6: int = 0  # uint16
    unknown7: int = 0  # uint64

    @classmethod
    def read(cls, reader: Reader) -> ObjectCatalogHeader:
        return cls(
            version=reader.read_uint32(),
            catalog_version=reader.read_uint32(),
            name_hash=reader.read_uint32(),
            desc_hash=reader.read_uint32(),
            price=reader.read_uint32(),
            unknown1=reader.read_uint32(),
            unknown2=reader.read_uint32(),
            unknown3=reader.read_uint32(),
            style_references=read_tgi_list(reader),
            unknown4=reader.read_uint16(),
            tags=read_object_tags(reader),
            selling_points=read_selling_points(reader, signed=False),
            unknown5=reader.read_uint64(),
            unknown6=reader.read_uint16(),
            unknown7=reader.read_uint64(),
        )

    def write(self, writer: Writer) -> None:
        writer.write_uint32(self.version)
        writer.write_uint32(self.catalog_version)
        writer.write_uint32(self.name_hash)
        writer.write_uint32(self.desc_hash)
        writer.write_uint32(self.price)
        writer.write_uint32(self.unknown1)
        writer.write_uint32(self.unknown2)
        writer.write_uint32(self.unknown3)
        write_tgi_list(writer, self.style_references)
        writer.write_uint16(self.unknown4)
        write_object_tags(writer, self.tags)
        write_selling_points(writer, self.selling_points, signed=False)
        writer.write_uint64(self.unknown5)
        writer.write_uint16(self.unknown6)
        writer.write_uint64(self.unknown7)
