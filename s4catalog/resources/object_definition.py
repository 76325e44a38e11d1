"""Object definition resource (property-table format).

Layout:
    uint16  version
    uint32  table position
    ...     property data, one value per table entry
    uint16  entry count            (at table position)
    entries (uint32 property id, uint32 absolute data offset)

Values are addressed through the table rather than by field order. The table
order is kept exactly as read so that re-encoding reproduces it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any

from s4catalog.const import (
    OBJECT_DEFINITION_DEFAULT_VERSION,
    OBJECT_DEFINITION_HEADER_SIZE,
    TYPE_OBJECT_DEFINITION,
)
from s4catalog.errors import InvalidMagicOrHeader, MalformedValue
from s4catalog.log import log
from s4catalog.model.primitives import TgiReference
from s4catalog.model.resource import CatalogResource

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer
    from s4catalog.model.primitives import ResourceKey


TABLE_POSITION_OFFSET = 2
TABLE_ENTRY_SIZE = 8
TGI_LIST_COUNT_SCALE = 4  # swapped TGI lists store count * 4


class PropertyId(IntEnum):
    NAME = 0xE7F07786
    TUNING = 0x790FA4BC
    TUNING_ID = 0xB994039B
    ICON = 0xCADED888
    RIG = 0xE206AE4F
    SLOT = 0x8A85AFF3
    MODEL = 0x8D20ACC6
    FOOTPRINT = 0x6C737AD8
    COMPONENTS = 0xE6E421FB
    MATERIAL_VARIANT = 0xECD5A95F
    UNKNOWN1 = 0xAC8E1BC0
    SIMOLEON_PRICE = 0xE4F4FAA4
    POSITIVE_ENVIRONMENT_SCORE = 0x7236BEEA
    NEGATIVE_ENVIRONMENT_SCORE = 0x44FC7512
    THUMBNAIL_GEOMETRY_STATE = 0x4233F8A0
    UNKNOWN2 = 0xEC3712E6
    ENVIRONMENT_SCORE_EMOTION_TAGS = 0x2172AEBE
    ENVIRONMENT_SCORES = 0xDCD08394
    UNKNOWN3 = 0x52F7F4BC
    IS_BABY = 0xAEE67A1C
    UNKNOWN4 = 0xF3936A90


class ValueKind(Enum):
    STRING = 'string'
    UINT8 = 'uint8'
    UINT32 = 'uint32'
    UINT64 = 'uint64'
    FLOAT = 'float'
    BOOL = 'bool'
    TGI_LIST = 'tgi_list'  # swapped-instance encoding
    UINT32_ARRAY = 'uint32_array'
    UINT16_ARRAY = 'uint16_array'
    FLOAT_ARRAY = 'float_array'
    BYTES = 'bytes'


PROPERTY_KINDS: dict[int, ValueKind] = {
    PropertyId.NAME: ValueKind.STRING,
    PropertyId.TUNING: ValueKind.STRING,
    PropertyId.TUNING_ID: ValueKind.UINT64,
    PropertyId.ICON: ValueKind.TGI_LIST,
    PropertyId.RIG: ValueKind.TGI_LIST,
    PropertyId.SLOT: ValueKind.TGI_LIST,
    PropertyId.MODEL: ValueKind.TGI_LIST,
    PropertyId.FOOTPRINT: ValueKind.TGI_LIST,
    PropertyId.COMPONENTS: ValueKind.UINT32_ARRAY,
    PropertyId.MATERIAL_VARIANT: ValueKind.STRING,
    PropertyId.UNKNOWN1: ValueKind.UINT8,
    PropertyId.SIMOLEON_PRICE: ValueKind.UINT32,
    PropertyId.POSITIVE_ENVIRONMENT_SCORE: ValueKind.FLOAT,
    PropertyId.NEGATIVE_ENVIRONMENT_SCORE: ValueKind.FLOAT,
    PropertyId.THUMBNAIL_GEOMETRY_STATE: ValueKind.UINT32,
    PropertyId.UNKNOWN2: ValueKind.BOOL,
    PropertyId.ENVIRONMENT_SCORE_EMOTION_TAGS: ValueKind.UINT16_ARRAY,
    PropertyId.ENVIRONMENT_SCORES: ValueKind.FLOAT_ARRAY,
    PropertyId.UNKNOWN3: ValueKind.UINT64,
    PropertyId.IS_BABY: ValueKind.BOOL,
    PropertyId.UNKNOWN4: ValueKind.BYTES,
}


@dataclass
class RawPropertyValue:
    """Undecoded value of a property id this codec does not know."""

    data: bytes


def default_property_value(kind: ValueKind) -> Any:
    """Value a freshly added property starts with."""
    if kind == ValueKind.STRING:
        return ''
    if kind in (ValueKind.UINT8, ValueKind.BOOL, ValueKind.UINT32, ValueKind.UINT64):
        return 0
    if kind == ValueKind.FLOAT:
        return 0.0
    if kind == ValueKind.BYTES:
        return b''
    return []


def _read_count(reader: Reader, what: str) -> int:
    position = reader.position
    count = reader.read_int32()
    if count < 0:
        raise MalformedValue(f'Negative {what} {count}', position)
    return count


def read_property_value(reader: Reader, kind: ValueKind) -> Any:
    """Read a single property value of the given kind."""
    if kind == ValueKind.STRING:
        length = _read_count(reader, 'string length')
        position = reader.position
        try:
            return reader.read_bytes(length).decode('ascii')
        except UnicodeDecodeError as e:
            raise MalformedValue('Invalid ASCII string', position + e.start) from e
    elif kind == ValueKind.UINT8:
        return reader.read_uint8()
    elif kind == ValueKind.UINT32:
        return reader.read_uint32()
    elif kind == ValueKind.UINT64:
        return reader.read_uint64()
    elif kind == ValueKind.FLOAT:
        return reader.read_float()
    elif kind == ValueKind.BOOL:
        return reader.read_uint8()
    elif kind == ValueKind.TGI_LIST:
        position = reader.position
        raw = _read_count(reader, 'TGI list count')
        if raw % TGI_LIST_COUNT_SCALE:
            raise MalformedValue(f'TGI list count {raw} is not a multiple of {TGI_LIST_COUNT_SCALE}', position)
        return [TgiReference.read_swapped(reader) for _ in range(raw // TGI_LIST_COUNT_SCALE)]
    elif kind == ValueKind.UINT32_ARRAY:
        count = _read_count(reader, 'array count')
        return [reader.read_uint32() for _ in range(count)]
    elif kind == ValueKind.UINT16_ARRAY:
        count = _read_count(reader, 'array count')
        return [reader.read_uint16() for _ in range(count)]
    elif kind == ValueKind.FLOAT_ARRAY:
        count = _read_count(reader, 'array count')
        return [reader.read_float() for _ in range(count)]
    else:
        length = _read_count(reader, 'byte length')
        return reader.read_bytes(length)


def write_property_value(writer: Writer, kind: ValueKind, value: Any) -> None:
    """Write a single property value of the given kind."""
    if kind == ValueKind.STRING:
        data = value.encode('ascii')
        writer.write_int32(len(data))
        writer.write_bytes(data)
    elif kind == ValueKind.UINT8:
        writer.write_uint8(value)
    elif kind == ValueKind.UINT32:
        writer.write_uint32(value)
    elif kind == ValueKind.UINT64:
        writer.write_uint64(value)
    elif kind == ValueKind.FLOAT:
        writer.write_float(value)
    elif kind == ValueKind.BOOL:
        writer.write_uint8(value)
    elif kind == ValueKind.TGI_LIST:
        writer.write_int32(len(value) * TGI_LIST_COUNT_SCALE)
        for reference in value:
            reference.write_swapped(writer)
    elif kind == ValueKind.UINT32_ARRAY:
        writer.write_int32(len(value))
        for item in value:
            writer.write_uint32(item)
    elif kind == ValueKind.UINT16_ARRAY:
        writer.write_int32(len(value))
        for item in value:
            writer.write_uint16(item)
    elif kind == ValueKind.FLOAT_ARRAY:
        writer.write_int32(len(value))
        for item in value:
            writer.write_float(item)
    else:
        writer.write_int32(len(value))
        writer.write_bytes(value)


def _typed_property(property_id: PropertyId, doc: str) -> property:
    """Accessor for one known property: None when absent, adds it on set."""

    def getter(self: ObjectDefinitionResource) -> Any:
        return self.properties.get(property_id)

    def setter(self: ObjectDefinitionResource, value: Any) -> None:
        if value is None:
            self.remove_property(property_id)
            return
        if PROPERTY_KINDS[property_id] == ValueKind.STRING and not value.isascii():
            raise ValueError(f'Property 0x{property_id:08X} only holds ASCII text, got {value!r}')
        if property_id not in self.properties:
            self.order.append(property_id)
        self.properties[property_id] = value

    return property(getter, setter, doc=doc)


@dataclass
class ObjectDefinitionResource(CatalogResource):
    """Object definition: named, typed properties addressed through an offset table.

    ``order`` is the table as read, one id per entry. A file may list the same
    id more than once; every entry is written back and all of them share the
    value of the last one decoded.
    """

    TYPE_ID = TYPE_OBJECT_DEFINITION

    key: ResourceKey
    version: int = OBJECT_DEFINITION_DEFAULT_VERSION  # uint16
    # property id -> value; unknown ids hold RawPropertyValue
    properties: dict[int, Any] = field(default_factory=dict)
    order: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.order:
            self.order = list(self.properties)

    name = _typed_property(PropertyId.NAME, 'Object name.')
    tuning = _typed_property(PropertyId.TUNING, 'Tuning name.')
    tuning_id = _typed_property(PropertyId.TUNING_ID, 'Tuning instance id.')
    icon = _typed_property(PropertyId.ICON, 'Icon references.')
    rig = _typed_property(PropertyId.RIG, 'Rig references.')
    slot = _typed_property(PropertyId.SLOT, 'Slot references.')
    model = _typed_property(PropertyId.MODEL, 'Model references.')
    footprint = _typed_property(PropertyId.FOOTPRINT, 'Footprint references.')
    components = _typed_property(PropertyId.COMPONENTS, 'Component hashes.')
    material_variant = _typed_property(PropertyId.MATERIAL_VARIANT, 'Material variant name.')
    unknown1 = _typed_property(PropertyId.UNKNOWN1, 'Unknown byte.')
    simoleon_price = _typed_property(PropertyId.SIMOLEON_PRICE, 'Price in simoleons.')
    positive_environment_score = _typed_property(PropertyId.POSITIVE_ENVIRONMENT_SCORE, 'Positive environment score.')
    negative_environment_score = _typed_property(PropertyId.NEGATIVE_ENVIRONMENT_SCORE, 'Negative environment score.')
    thumbnail_geometry_state = _typed_property(PropertyId.THUMBNAIL_GEOMETRY_STATE, 'Thumbnail geometry state hash.')
    unknown2 = _typed_property(PropertyId.UNKNOWN2, 'Unknown flag byte, kept as stored.')
    environment_score_emotion_tags = _typed_property(
        PropertyId.ENVIRONMENT_SCORE_EMOTION_TAGS, 'Emotion tags scored by the environment.'
    )
    environment_scores = _typed_property(PropertyId.ENVIRONMENT_SCORES, 'Environment scores, one per emotion tag.')
    unknown3 = _typed_property(PropertyId.UNKNOWN3, 'Unknown 64-bit value.')
    is_baby = _typed_property(PropertyId.IS_BABY, 'Baby object flag byte, kept as stored (0 or 1 in practice).')
    unknown4 = _typed_property(PropertyId.UNKNOWN4, 'Unknown byte payload.')

    @property
    def property_ids(self) -> list[int]:
        """Property ids in table order, repeated ids included."""
        return list(self.order)

    def has_property(self, property_id: int) -> bool:
        return property_id in self.properties

    def add_property(self, property_id: int) -> None:
        """Add a known property with its default value. No-op if already present."""
        if property_id in self.properties:
            return
        kind = PROPERTY_KINDS.get(property_id)
        if kind is None:
            raise ValueError(f'Cannot add unknown property 0x{property_id:08X} without raw data')
        self.properties[property_id] = default_property_value(kind)
        self.order.append(property_id)

    def remove_property(self, property_id: int) -> None:
        """Drop a property and every table entry naming it."""
        self.properties.pop(property_id, None)
        self.order = [i for i in self.order if i != property_id]

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> ObjectDefinitionResource:
        version = reader.read_uint16()
        table_position = reader.read_uint32()
        if table_position < OBJECT_DEFINITION_HEADER_SIZE or table_position > reader.size:
            raise InvalidMagicOrHeader(f'Invalid table position 0x{table_position:08X} for {reader.size} bytes')

        reader.position = table_position
        entry_count = reader.read_uint16()
        entries = []
        for _ in range(entry_count):
            property_id = reader.read_uint32()
            offset = reader.read_uint32()
            if offset < OBJECT_DEFINITION_HEADER_SIZE or offset > table_position:
                raise InvalidMagicOrHeader(f'Property 0x{property_id:08X} has invalid data offset 0x{offset:08X}')
            entries.append((property_id, offset))
        table_end = reader.position

        offsets = sorted({offset for _, offset in entries})
        properties: dict[int, Any] = {}
        order = []
        for property_id, offset in entries:
            if property_id in properties:
                log.warning(f'Duplicate object definition property 0x{property_id:08X}, last value wins')
            order.append(property_id)
            kind = PROPERTY_KINDS.get(property_id)
            if kind is None:
                end = next((o for o in offsets if o > offset), table_position)
                reader.position = offset
                properties[property_id] = RawPropertyValue(reader.read_bytes(end - offset))
                log.warning(f'Unknown object definition property 0x{property_id:08X}, keeping {end - offset} raw bytes')
                continue
            reader.position = offset
            properties[property_id] = read_property_value(reader, kind)

        reader.position = table_end
        return cls(key=key, version=version, properties=properties, order=order)

    def write(self, writer: Writer) -> None:
        start = writer.position
        writer.write_uint16(self.version)
        writer.write_zeros(4)  # table position, patched below

        order = self.order + [i for i in self.properties if i not in self.order]
        positions = []
        for property_id in order:
            value = self.properties[property_id]
            positions.append((property_id, writer.position - start))
            if isinstance(value, RawPropertyValue):
                writer.write_bytes(value.data)
            else:
                write_property_value(writer, PROPERTY_KINDS[property_id], value)

        table_position = writer.position - start
        writer.write_uint16(len(positions))
        for property_id, offset in positions:
            writer.write_uint32(property_id)
            writer.write_uint32(offset)
        end = writer.position

        writer.position = start + TABLE_POSITION_OFFSET
        writer.write_uint32(table_position)
        writer.position = end
