"""
Tests for resource keys, TGI references and tagged values.
"""

import pytest

from s4catalog.errors import MalformedValue, UnexpectedEndOfData, UnknownValueTag
from s4catalog.io.reader import Reader
from s4catalog.io.writer import Writer
from s4catalog.model.primitives import ResourceKey, TgiReference, swap_instance
from s4catalog.model.values import TypedValue, ValueTag


def test_tgi_layout_is_instance_type_group() -> None:
    """Test TGI references are stored instance first."""
    reference = TgiReference(type=0x11223344, group=0x55667788, instance=0x0102030405060708)
    writer = Writer()
    reference.write(writer)

    data = writer.to_bytes()
    assert len(data) == TgiReference.SIZE
    assert data == bytes.fromhex('0807060504030201' '44332211' '88776655')
    assert TgiReference.read(Reader(data)) == reference


def test_tgi_swapped_instance() -> None:
    """Test swapped-instance encoding exchanges the 32-bit halves symmetrically."""
    reference = TgiReference(type=1, group=2, instance=0xAABBCCDD11223344)
    writer = Writer()
    reference.write_swapped(writer)

    data = writer.to_bytes()
    assert data[:8] == (0x11223344AABBCCDD).to_bytes(8, 'little')
    assert TgiReference.read_swapped(Reader(data)) == reference
    assert swap_instance(swap_instance(0xAABBCCDD11223344)) == 0xAABBCCDD11223344


def test_tgi_empty() -> None:
    """Test the all-zero sentinel."""
    assert TgiReference.empty().is_empty()
    assert TgiReference() == TgiReference.empty()
    assert not TgiReference(type=1).is_empty()


def test_tgi_truncated() -> None:
    """Test a short buffer fails instead of returning a partial reference."""
    with pytest.raises(UnexpectedEndOfData):
        TgiReference.read(Reader(b'\x00' * 15))


def test_resource_key_is_immutable() -> None:
    """Test ResourceKey is a frozen value type."""
    key = ResourceKey(type=0x319E4F1D, group=0, instance=0x10)

    assert str(key) == '319E4F1D:00000000:0000000000000010'
    with pytest.raises(AttributeError):
        key.type = 1  # type: ignore[misc]


@pytest.mark.parametrize('value,expected', [
    (TypedValue(ValueTag.TEXT, 'x'), b'\x00\x01x'),
    (TypedValue.of_string('chair'), b'\x01\x05chair'),
    (TypedValue(ValueTag.INT32, -5), b'\x02\xfb\xff\xff\xff'),
    (TypedValue(ValueTag.UINT32, 0xFFFFFFFF), b'\x03\xff\xff\xff\xff'),
    (TypedValue.of_bool(True), b'\x04\x01'),
    (TypedValue(ValueTag.FLOAT, 0.25), b'\x05\x00\x00\x80\x3e'),
    (TypedValue(ValueTag.DOUBLE, 0.5), b'\x06\x00\x00\x00\x00\x00\x00\xe0\x3f'),
    (TypedValue(ValueTag.UINT64, 2 ** 63), b'\x07\x00\x00\x00\x00\x00\x00\x00\x80'),
])
def test_typed_value_wire_format(value: TypedValue, expected: bytes) -> None:
    """Test each tag writes its fixed tag byte and payload, and reads back."""
    writer = Writer()
    value.write(writer)

    assert writer.to_bytes() == expected
    assert TypedValue.read(Reader(expected)) == value


def test_typed_value_long_string_length_prefix() -> None:
    """Test strings of 128+ bytes use a multi-byte 7-bit length."""
    value = TypedValue.of_string('a' * 200)
    writer = Writer()
    value.write(writer)
    data = writer.to_bytes()

    # 200 = 0b1_1001000 -> 0xC8 0x01
    assert data[:3] == b'\x01\xc8\x01'
    assert len(data) == 3 + 200
    assert TypedValue.read(Reader(data)) == value


def test_typed_value_utf8_string() -> None:
    """Test non-ASCII strings are stored as UTF-8."""
    value = TypedValue.of_string('café')
    writer = Writer()
    value.write(writer)

    assert writer.to_bytes() == b'\x01\x05caf\xc3\xa9'
    assert TypedValue.read(Reader(writer.to_bytes())) == value


def test_typed_value_invalid_utf8() -> None:
    """Test undecodable string bytes raise a catalog error with the position."""
    with pytest.raises(MalformedValue) as exc_info:
        TypedValue.read(Reader(b'\x01\x02\xff\xfe'))

    assert exc_info.value.position == 1


def test_typed_value_unknown_tag() -> None:
    """Test tags outside 0-7 raise UnknownValueTag."""
    with pytest.raises(UnknownValueTag) as exc_info:
        TypedValue.read(Reader(b'\x08\x00\x00\x00\x00'))

    assert exc_info.value.tag == 8
    assert exc_info.value.position == 0
