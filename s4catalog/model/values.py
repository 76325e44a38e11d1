"""Tagged generic values.

A one-byte tag selects the payload type that follows it. The tag byte is the
wire discriminant and is preserved as-is. Strings use the .NET BinaryWriter
layout: 7-bit encoded byte length followed by UTF-8.

    0   TEXT     string (fallback for values with no dedicated tag)
    1   STRING   string
    2   INT32    int32
    3   UINT32   uint32
    4   BOOL     one byte, 0 is false
    5   FLOAT    float32
    6   DOUBLE   float64
    7   UINT64   uint64
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Union

from s4catalog.errors import UnknownValueTag

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer


class ValueTag(IntEnum):
    TEXT = 0
    STRING = 1
    INT32 = 2
    UINT32 = 3
    BOOL = 4
    FLOAT = 5
    DOUBLE = 6
    UINT64 = 7


Value = Union[bool, int, float, str]


@dataclass
class TypedValue:
    """A value together with the tag that decides its encoding."""

    tag: ValueTag
    value: Value

    @classmethod
    def read(cls, reader: Reader) -> TypedValue:
        """Read tag byte and payload."""
        position = reader.position
        raw_tag = reader.read_uint8()
        try:
            tag = ValueTag(raw_tag)
        except ValueError:
            raise UnknownValueTag(raw_tag, position) from None

        if tag in (ValueTag.TEXT, ValueTag.STRING):
            value: Value = reader.read_prefixed_string()
        elif tag == ValueTag.INT32:
            value = reader.read_int32()
        elif tag == ValueTag.UINT32:
            value = reader.read_uint32()
        elif tag == ValueTag.BOOL:
            value = reader.read_bool()
        elif tag == ValueTag.FLOAT:
            value = reader.read_float()
        elif tag == ValueTag.DOUBLE:
            value = reader.read_double()
        else:
            value = reader.read_uint64()
        return cls(tag=tag, value=value)

    def write(self, writer: Writer) -> None:
        """Write tag byte and payload."""
        writer.write_uint8(self.tag)
        tag = self.tag
        if tag in (ValueTag.TEXT, ValueTag.STRING):
            writer.write_prefixed_string(self.value)
        elif tag == ValueTag.INT32:
            writer.write_int32(self.value)
        elif tag == ValueTag.UINT32:
            writer.write_uint32(self.value)
        elif tag == ValueTag.BOOL:
            writer.write_bool(bool(self.value))
        elif tag == ValueTag.FLOAT:
            writer.write_float(self.value)
        elif tag == ValueTag.DOUBLE:
            writer.write_double(self.value)
        else:
            writer.write_uint64(self.value)

    @classmethod
    def of_bool(cls, value: bool) -> TypedValue:
        return cls(tag=ValueTag.BOOL, value=value)

    @classmethod
    def of_string(cls, value: str) -> TypedValue:
        return cls(tag=ValueTag.STRING, value=value)
