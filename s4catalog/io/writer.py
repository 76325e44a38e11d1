"""Binary writer with seek support for catalog resource serialization."""

from __future__ import annotations

import io
import struct


COUNT_LIMITS = {1: 0xFF, 2: 0xFFFF, 4: 0xFFFFFFFF}


class Writer:
    """Binary writer with seek support for two-pass offset patching."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    @property
    def position(self) -> int:
        """Current write position."""
        return self._buffer.tell()

    @position.setter
    def position(self, value: int) -> None:
        """Seek to position."""
        self._buffer.seek(value)

    @property
    def size(self) -> int:
        """Current size of written data."""
        current = self._buffer.tell()
        self._buffer.seek(0, 2)  # Seek to end
        size = self._buffer.tell()
        self._buffer.seek(current)  # Restore position
        return size

    def to_bytes(self) -> bytes:
        """Get all written data as bytes."""
        return self._buffer.getvalue()

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer.write(data)

    def write_int8(self, value: int) -> None:
        """Write signed 8-bit integer."""
        self._buffer.write(struct.pack('<b', value))

    def write_uint8(self, value: int) -> None:
        """Write unsigned 8-bit integer."""
        self._buffer.write(struct.pack('<B', value))

    def write_int16(self, value: int) -> None:
        """Write signed 16-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<h', value))

    def write_uint16(self, value: int) -> None:
        """Write unsigned 16-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<H', value))

    def write_int32(self, value: int) -> None:
        """Write signed 32-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<i', value))

    def write_uint32(self, value: int) -> None:
        """Write unsigned 32-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<I', value))

    def write_int64(self, value: int) -> None:
        """Write signed 64-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<q', value))

    def write_uint64(self, value: int) -> None:
        """Write unsigned 64-bit integer (little-endian)."""
        self._buffer.write(struct.pack('<Q', value))

    def write_float(self, value: float) -> None:
        """Write 32-bit float (little-endian)."""
        self._buffer.write(struct.pack('<f', value))

    def write_double(self, value: float) -> None:
        """Write 64-bit double (little-endian)."""
        self._buffer.write(struct.pack('<d', value))

    def write_bool(self, value: bool) -> None:
        """Write boolean (1 byte)."""
        self.write_uint8(1 if value else 0)

    def write_7bit_int(self, value: int) -> None:
        """Write .NET 7-bit encoded int32."""
        if value < 0 or value > 0xFFFFFFFF:
            raise ValueError(f'Cannot 7-bit encode {value}')
        while value >= 0x80:
            self.write_uint8((value & 0x7F) | 0x80)
            value >>= 7
        self.write_uint8(value)

    def write_prefixed_string(self, value: str) -> None:
        """Write .NET BinaryWriter string: 7-bit encoded byte length + UTF-8."""
        data = value.encode('utf-8')
        self.write_7bit_int(len(data))
        self._buffer.write(data)

    def write_count(self, width: int, count: int) -> None:
        """Write an unsigned list count of 1, 2 or 4 bytes. Raises if count overflows."""
        limit = COUNT_LIMITS.get(width)
        if limit is None:
            raise ValueError(f'Unsupported count width {width}')
        if count > limit:
            raise ValueError(f'List of {count} items does not fit a {width}-byte count')
        if width == 1:
            self.write_uint8(count)
        elif width == 2:
            self.write_uint16(count)
        else:
            self.write_uint32(count)

    def write_zeros(self, count: int) -> None:
        """Write zero bytes (for placeholders)."""
        self._buffer.write(b'\x00' * count)
