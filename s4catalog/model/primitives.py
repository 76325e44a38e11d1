"""Fixed-size primitive structures shared by every catalog resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer


UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def swap_instance(value: int) -> int:
    """Exchange the high and low 32-bit halves of a 64-bit instance id."""
    return ((value << 32) | (value >> 32)) & UINT64_MASK


@dataclass(frozen=True)
class ResourceKey:
    """Identity of a resource inside a package. Never read from the payload."""

    type: int  # uint32
    group: int  # uint32
    instance: int  # uint64

    def __str__(self) -> str:
        return f'{self.type:08X}:{self.group:08X}:{self.instance:016X}'


@dataclass(frozen=True)
class TgiReference:
    """Reference to another resource (16 bytes).

    Stored in Instance-Type-Group order. Some fields store the instance with
    its 32-bit halves swapped; those use read_swapped/write_swapped.
    """

    type: int = 0  # uint32
    group: int = 0  # uint32
    instance: int = 0  # uint64

    SIZE = 16

    @classmethod
    def read(cls, reader: Reader) -> TgiReference:
        """Read TgiReference from reader."""
        instance = reader.read_uint64()
        type_id = reader.read_uint32()
        group = reader.read_uint32()
        return cls(type=type_id, group=group, instance=instance)

    def write(self, writer: Writer) -> None:
        """Write TgiReference to writer."""
        writer.write_uint64(self.instance)
        writer.write_uint32(self.type)
        writer.write_uint32(self.group)

    @classmethod
    def read_swapped(cls, reader: Reader) -> TgiReference:
        """Read TgiReference whose instance halves are stored swapped."""
        instance = swap_instance(reader.read_uint64())
        type_id = reader.read_uint32()
        group = reader.read_uint32()
        return cls(type=type_id, group=group, instance=instance)

    def write_swapped(self, writer: Writer) -> None:
        """Write TgiReference with instance halves swapped."""
        writer.write_uint64(swap_instance(self.instance))
        writer.write_uint32(self.type)
        writer.write_uint32(self.group)

    @classmethod
    def empty(cls) -> TgiReference:
        """Create the all-zero reference."""
        return cls(type=0, group=0, instance=0)

    def is_empty(self) -> bool:
        """Check if reference is all zeros."""
        return self.type == 0 and self.group == 0 and self.instance == 0

    def __str__(self) -> str:
        return f'{self.type:08X}:{self.group:08X}:{self.instance:016X}'
