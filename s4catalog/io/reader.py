"""Binary reader with position tracking for catalog resource parsing."""

from __future__ import annotations

import struct

from s4catalog.errors import MalformedValue, UnexpectedEndOfData


class Reader:
    """Binary reader with position tracking and little-endian support."""

    def __init__(self, data: bytes, position: int = 0) -> None:
        self._data = bytes(data)
        self._position = 0
        self.position = position

    @property
    def position(self) -> int:
        """Current read position."""
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        """Set read position."""
        if value < 0 or value > len(self._data):
            raise UnexpectedEndOfData(f'Position {value} out of range [0, {len(self._data)}]')
        self._position = value

    @property
    def size(self) -> int:
        """Total size of data."""
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Bytes remaining to read."""
        return len(self._data) - self._position

    def read_bytes(self, count: int) -> bytes:
        """Read raw bytes."""
        if count < 0 or self._position + count > len(self._data):
            raise UnexpectedEndOfData(
                f'Cannot read {count} bytes at position {self._position}, only {self.remaining} remaining'
            )
        result = self._data[self._position : self._position + count]
        self._position += count
        return result

    def read_int8(self) -> int:
        """Read signed 8-bit integer."""
        return struct.unpack('<b', self.read_bytes(1))[0]

    def read_uint8(self) -> int:
        """Read unsigned 8-bit integer."""
        return struct.unpack('<B', self.read_bytes(1))[0]

    def read_int16(self) -> int:
        """Read signed 16-bit integer (little-endian)."""
        return struct.unpack('<h', self.read_bytes(2))[0]

    def read_uint16(self) -> int:
        """Read unsigned 16-bit integer (little-endian)."""
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_int32(self) -> int:
        """Read signed 32-bit integer (little-endian)."""
        return struct.unpack('<i', self.read_bytes(4))[0]

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer (little-endian)."""
        return struct.unpack('<I', self.read_bytes(4))[0]

    def read_int64(self) -> int:
        """Read signed 64-bit integer (little-endian)."""
        return struct.unpack('<q', self.read_bytes(8))[0]

    def read_uint64(self) -> int:
        """Read unsigned 64-bit integer (little-endian)."""
        return struct.unpack('<Q', self.read_bytes(8))[0]

    def read_float(self) -> float:
        """Read 32-bit float (little-endian)."""
        return struct.unpack('<f', self.read_bytes(4))[0]

    def read_double(self) -> float:
        """Read 64-bit double (little-endian)."""
        return struct.unpack('<d', self.read_bytes(8))[0]

    def read_bool(self) -> bool:
        """Read boolean (1 byte)."""
        return self.read_uint8() != 0

    def read_count(self, width: int) -> int:
        """Read an unsigned list count of 1, 2 or 4 bytes."""
        if width == 1:
            return self.read_uint8()
        if width == 2:
            return self.read_uint16()
        if width == 4:
            return self.read_uint32()
        raise ValueError(f'Unsupported count width {width}')

    def read_7bit_int(self) -> int:
        """Read .NET 7-bit encoded int32 (at most 5 bytes, low groups first)."""
        start = self._position
        result = 0
        for shift in range(0, 35, 7):
            byte = self.read_uint8()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
        raise MalformedValue('7-bit encoded int longer than 5 bytes', start)

    def read_prefixed_string(self) -> str:
        """Read .NET BinaryWriter string: 7-bit encoded byte length + UTF-8."""
        start = self._position
        length = self.read_7bit_int()
        data = self.read_bytes(length)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError:
            raise MalformedValue('Invalid UTF-8 string', start) from None

    def skip(self, count: int) -> None:
        """Skip bytes."""
        if self._position + count > len(self._data):
            raise UnexpectedEndOfData(f'Skip of {count} bytes past end of data at position {self._position}')
        self._position += count
