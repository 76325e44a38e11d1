"""
Tests for the simple, abstract and object-style header shapes.
"""

import pytest

from s4catalog.const import FNV_OFFSET_BASIS
from s4catalog.errors import UnsupportedVersion
from s4catalog.io.reader import Reader
from s4catalog.io.writer import Writer
from s4catalog.model.lists import SellingPoint
from s4catalog.model.primitives import TgiReference
from s4catalog.model.shapes import AbstractCatalogHeader, ObjectCatalogHeader, SimpleCatalogHeader


def _encode(header) -> bytes:
    writer = Writer()
    header.write(writer)
    return writer.to_bytes()


def test_simple_header_defaults() -> None:
    """Test simple header version and size."""
    header = SimpleCatalogHeader()
    data = _encode(header)

    assert header.version == 0x07
    assert len(data) == 4 + 67
    assert SimpleCatalogHeader.read(Reader(data)) == header


def test_abstract_header_defaults() -> None:
    """Test abstract header defaults: hashes at the FNV seed, empty fallback key."""
    header = AbstractCatalogHeader()

    assert header.version == 0x19
    assert header.aural_materials_version == 1
    assert header.aural_properties_version == 2
    for value in (
        header.aural_materials1,
        header.aural_materials2,
        header.aural_materials3,
        header.aural_quality,
        header.aural_ambient_object,
    ):
        assert value == FNV_OFFSET_BASIS
    assert header.fallback_object_key.is_empty()
    assert len(_encode(header)) == 160


def test_abstract_fallback_key_gate() -> None:
    """Test the fallback key is written from version 0x19 only."""
    key = TgiReference(type=0x319E4F1D, group=0, instance=0x42)
    old = AbstractCatalogHeader(version=0x18, fallback_object_key=key)
    new = AbstractCatalogHeader(version=0x19, fallback_object_key=key)

    old_data = _encode(old)
    new_data = _encode(new)
    assert len(new_data) - len(old_data) == TgiReference.SIZE
    assert AbstractCatalogHeader.read(Reader(old_data)).fallback_object_key.is_empty()
    assert AbstractCatalogHeader.read(Reader(new_data)).fallback_object_key == key


def test_abstract_fallback_key_written_when_empty() -> None:
    """Test the gated block is present at 0x19 even with its default value."""
    data = _encode(AbstractCatalogHeader(version=0x19))
    assert data[-16:] == bytes(16)


@pytest.mark.parametrize('aural_version,size', [
    (1, 156),
    (2, 160),
    (3, 169),
    (4, 161),
])
def test_aural_properties_versions(aural_version: int, size: int) -> None:
    """Test each aural properties version stores its own field set."""
    header = AbstractCatalogHeader(
        aural_properties_version=aural_version,
        aural_ambient_object=0x11,
        ambience_file_instance_id=0x22,
        is_override_ambience=1,
        unknown01=0x33,
    )
    data = _encode(header)
    assert len(data) == size

    parsed = AbstractCatalogHeader.read(Reader(data))
    assert parsed.aural_ambient_object == (0x11 if aural_version > 1 else FNV_OFFSET_BASIS)
    assert parsed.ambience_file_instance_id == (0x22 if aural_version == 3 else 0)
    assert parsed.unknown01 == (0x33 if aural_version == 4 else 0)


def test_aural_properties_unsupported_version() -> None:
    """Test an aural properties version above 4 is rejected on decode."""
    data = _encode(AbstractCatalogHeader(aural_properties_version=5))

    with pytest.raises(UnsupportedVersion) as exc_info:
        AbstractCatalogHeader.read(Reader(data))
    assert exc_info.value.version == 5


def test_abstract_populated_round_trip() -> None:
    """Test placement, slot and color fields survive a round trip."""
    header = AbstractCatalogHeader(
        placement_flags_high=0x80000000,
        placement_flags_low=0x1,
        slot_type_set=0xABCDEF,
        slot_deco_size=3,
        catalog_group=0x99,
        state_usage=2,
        colors=[0xFF112233, 0xFF445566],
        fence_height=4,
        is_stackable=1,
        can_item_depreciate=1,
        unused1=7,
    )
    assert AbstractCatalogHeader.read(Reader(_encode(header))) == header


def test_object_header_layout() -> None:
    """Test object-style header defaults and field widths."""
    header = ObjectCatalogHeader()
    data = _encode(header)

    assert header.version == 1
    assert header.catalog_version == 9
    assert len(data) == 61


def test_object_header_round_trip() -> None:
    """Test object-style header keeps its ITG style list, 16-bit tags and selling points."""
    header = ObjectCatalogHeader(
        catalog_version=0x0A,
        name_hash=0x1,
        price=250,
        style_references=[TgiReference(type=0xA, group=0xB, instance=0xC)],
        unknown4=0xBEEF,
        tags=[0xFFFF, 1],
        selling_points=[SellingPoint(commodity=2, amount=0xFFFFFFFF)],
        unknown5=0x5,
        unknown6=0x6,
        unknown7=0x7,
    )
    assert ObjectCatalogHeader.read(Reader(_encode(header))) == header
