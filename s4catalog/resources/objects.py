"""Placeable object catalog resources built on the abstract header."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from s4catalog.const import TYPE_CCOL, TYPE_COBJ
from s4catalog.model.resource import CatalogResource
from s4catalog.model.shapes import AbstractCatalogHeader

if TYPE_CHECKING:
    from s4catalog.io.reader import Reader
    from s4catalog.io.writer import Writer
    from s4catalog.model.primitives import ResourceKey


@dataclass
class CobjResource(CatalogResource):
    """Catalog object: the abstract header and nothing else."""

    TYPE_ID = TYPE_COBJ

    key: ResourceKey
    header: AbstractCatalogHeader = field(default_factory=AbstractCatalogHeader)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CobjResource:
        return cls(key=key, header=AbstractCatalogHeader.read(reader))

    def write(self, writer: Writer) -> None:
        self.header.write(writer)


@dataclass
class CcolResource(CatalogResource):
    """Catalog collection: the abstract header and nothing else."""

    TYPE_ID = TYPE_CCOL

    key: ResourceKey
    header: AbstractCatalogHeader = field(default_factory=AbstractCatalogHeader)

    @classmethod
    def read(cls, key: ResourceKey, reader: Reader) -> CcolResource:
        return cls(key=key, header=AbstractCatalogHeader.read(reader))

    def write(self, writer: Writer) -> None:
        self.header.write(writer)
