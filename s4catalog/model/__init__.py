"""Catalog resource building blocks."""

from s4catalog.model.common import CatalogCommon, PackDisplayOption
from s4catalog.model.lists import SellingPoint
from s4catalog.model.primitives import ResourceKey, TgiReference
from s4catalog.model.shapes import AbstractCatalogHeader, ObjectCatalogHeader, SimpleCatalogHeader
from s4catalog.model.values import TypedValue, ValueTag

__all__ = [
    'AbstractCatalogHeader',
    'CatalogCommon',
    'ObjectCatalogHeader',
    'PackDisplayOption',
    'ResourceKey',
    'SellingPoint',
    'SimpleCatalogHeader',
    'TgiReference',
    'TypedValue',
    'ValueTag',
]
