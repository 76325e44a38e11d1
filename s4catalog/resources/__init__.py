"""Concrete catalog resource definitions."""

from s4catalog.resources.building import (
    CblkResource,
    CfenResource,
    CfndResource,
    CfrzResource,
    CralResource,
    CspnResource,
    CstlResource,
    CstrResource,
    CwalResource,
)
from s4catalog.resources.legacy import A8f7b517CatalogResource, C48c28979CatalogResource, RoofStyleResource
from s4catalog.resources.object_definition import ObjectDefinitionResource, PropertyId
from s4catalog.resources.objects import CcolResource, CobjResource
from s4catalog.resources.surfaces import (
    CflrResource,
    CfltResource,
    CftrResource,
    CpltResource,
    CrptResource,
    CrtrResource,
    CtptResource,
    StrmResource,
)

__all__ = [
    'A8f7b517CatalogResource',
    'C48c28979CatalogResource',
    'CblkResource',
    'CcolResource',
    'CfenResource',
    'CflrResource',
    'CfltResource',
    'CfndResource',
    'CfrzResource',
    'CftrResource',
    'CobjResource',
    'CpltResource',
    'CralResource',
    'CrptResource',
    'CrtrResource',
    'CspnResource',
    'CstlResource',
    'CstrResource',
    'CtptResource',
    'CwalResource',
    'ObjectDefinitionResource',
    'PropertyId',
    'RoofStyleResource',
    'StrmResource',
]
