"""Decode/encode entry points shared by every concrete resource."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, TypeVar

from s4catalog.io.reader import Reader
from s4catalog.io.writer import Writer
from s4catalog.log import log

if TYPE_CHECKING:
    from s4catalog.model.primitives import ResourceKey


R = TypeVar('R', bound='CatalogResource')


class CatalogResource:
    """Mixin giving a dataclass resource its byte-level contract.

    Subclasses are dataclasses whose first field is ``key`` and which
    implement ``read(key, reader)`` and ``write(writer)``. Empty input
    produces a resource with default field values.
    """

    TYPE_ID: ClassVar[int]
    key: ResourceKey

    @classmethod
    def decode(cls: type[R], key: ResourceKey, data: bytes) -> R:
        """Decode a resource from its raw payload."""
        if not data:
            log.debug(f'{cls.__name__} {key}: empty payload, using defaults')
            return cls(key=key)

        reader = Reader(data)
        resource = cls.read(key, reader)
        if reader.remaining:
            log.warning(f'{cls.__name__} {key}: ignoring {reader.remaining} trailing bytes at {reader.position}')
        log.debug(f'{cls.__name__} {key}: decoded {reader.position} bytes')
        return resource

    def encode(self) -> bytes:
        """Encode the resource to its raw payload."""
        writer = Writer()
        self.write(writer)
        data = writer.to_bytes()
        log.debug(f'{type(self).__name__} {self.key}: encoded {len(data)} bytes')
        return data

    @classmethod
    def read(cls: type[R], key: ResourceKey, reader: Reader) -> R:
        raise NotImplementedError

    def write(self, writer: Writer) -> None:
        raise NotImplementedError
