"""
Tests for the binary reader and writer.
"""

import struct

import pytest

from s4catalog.errors import CatalogError, MalformedValue, UnexpectedEndOfData
from s4catalog.io.reader import Reader
from s4catalog.io.writer import Writer


def test_reader_little_endian() -> None:
    """Test fixed-width reads are little-endian."""
    reader = Reader(b'\x01\x00\x02\x00\x00\x00\x03\x00\x00\x00\x00\x00\x00\x00')

    assert reader.read_uint16() == 1
    assert reader.read_uint32() == 2
    assert reader.read_uint64() == 3
    assert reader.remaining == 0


def test_reader_signed_and_float() -> None:
    """Test signed integers and floats."""
    data = struct.pack('<hif', -2, -70000, 1.5)
    reader = Reader(data)

    assert reader.read_int16() == -2
    assert reader.read_int32() == -70000
    assert reader.read_float() == 1.5


def test_reader_overrun_raises() -> None:
    """Reading past the end raises UnexpectedEndOfData, which is still a ValueError."""
    reader = Reader(b'\x01\x02\x03')

    with pytest.raises(UnexpectedEndOfData):
        reader.read_uint32()

    # Position is unchanged after a failed read
    assert reader.position == 0
    assert issubclass(UnexpectedEndOfData, CatalogError)
    assert issubclass(UnexpectedEndOfData, ValueError)


def test_reader_skip_and_seek_bounds() -> None:
    """Test skip and position setter refuse to leave the buffer."""
    reader = Reader(b'\x00' * 4)

    reader.skip(4)
    with pytest.raises(UnexpectedEndOfData):
        reader.skip(1)
    with pytest.raises(UnexpectedEndOfData):
        reader.position = 5


def test_reader_start_position() -> None:
    """Test reader can start at an offset."""
    reader = Reader(b'\xff\x2a', 1)

    assert reader.read_uint8() == 0x2A


@pytest.mark.parametrize('width,count,expected', [
    (1, 3, b'\x03'),
    (2, 3, b'\x03\x00'),
    (4, 3, b'\x03\x00\x00\x00'),
])
def test_count_round_trip(width: int, count: int, expected: bytes) -> None:
    """Test list counts of each width."""
    writer = Writer()
    writer.write_count(width, count)

    assert writer.to_bytes() == expected
    assert Reader(expected).read_count(width) == count


def test_count_overflow_is_refused() -> None:
    """A list too long for its count prefix cannot be encoded."""
    writer = Writer()

    with pytest.raises(ValueError):
        writer.write_count(1, 256)


def test_writer_patch_offset() -> None:
    """Test two-pass offset patching via position."""
    writer = Writer()
    writer.write_uint16(1)
    writer.write_zeros(4)
    writer.write_bytes(b'abc')
    end = writer.position

    writer.position = 2
    writer.write_uint32(end)
    writer.position = end
    writer.write_uint8(0xFF)

    assert writer.to_bytes() == b'\x01\x00\x09\x00\x00\x00abc\xff'
    assert writer.size == 10


@pytest.mark.parametrize('value,expected', [
    (0, b'\x00'),
    (0x7F, b'\x7f'),
    (0x80, b'\x80\x01'),
    (300, b'\xac\x02'),
    (0xFFFFFFFF, b'\xff\xff\xff\xff\x0f'),
])
def test_7bit_int(value: int, expected: bytes) -> None:
    """Test .NET 7-bit encoded lengths."""
    writer = Writer()
    writer.write_7bit_int(value)

    assert writer.to_bytes() == expected
    assert Reader(expected).read_7bit_int() == value


def test_7bit_int_too_long() -> None:
    """Test a sixth continuation byte is malformed."""
    with pytest.raises(MalformedValue) as e:
        Reader(b'\x80\x80\x80\x80\x80\x01').read_7bit_int()
    assert e.value.position == 0
