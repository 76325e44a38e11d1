"""
Tests for build-mode resources: fences, walls, stairs, friezes and blocks.
"""

import pytest

from s4catalog.const import CSTL_REFERENCE_COUNT
from s4catalog.model.primitives import TgiReference
from s4catalog.model.references import (
    CornerWallHeight,
    Gp4References,
    Gp7References,
    Gp8References,
    Gp9References,
    MainWallHeight,
    ModlEntry,
    WallImgGroup,
    WallMatdEntry,
)
from s4catalog.resources import (
    CblkResource,
    CfenResource,
    CfrzResource,
    CspnResource,
    CstlResource,
    CstrResource,
    CwalResource,
)


def _ref(n: int) -> TgiReference:
    return TgiReference(type=n, group=n, instance=n * 0x0101010101010101)


@pytest.mark.parametrize('bundle_type,count', [
    (Gp4References, 4),
    (Gp7References, 7),
    (Gp8References, 8),
    (Gp9References, 9),
])
def test_reference_bundle_sizes(bundle_type, count: int) -> None:
    """Test each bundle holds its fixed number of named slots."""
    assert bundle_type.size() == 16 * count
    assert all(ref.is_empty() for ref in vars(bundle_type()).values())


def test_cfen_round_trip(make_key, roundtrip) -> None:
    """Test fence entry lists, references, slot and unknown lists."""
    resource = CfenResource(
        key=make_key(CfenResource.TYPE_ID),
        modl_entries01=[ModlEntry(label=1, reference=_ref(1))],
        modl_entries03=[ModlEntry(label=i, reference=_ref(i)) for i in range(3)],
        references=Gp7References(ref01=_ref(1), ref07=_ref(7)),
        unk01=0x11,
        unk02=0x22,
        material_variant=0xABCDEF01,
        swatch_grouping=0x1234567890ABCDEF,
        slot=_ref(9),
        unk_list01=[1],
        unk_list03=[1, 2, 3],
        colors=[0xFFAA5500, 0xFF00AA55],
        unk04=0x44,
    )
    decoded = roundtrip(resource)

    assert decoded == resource
    assert decoded.modl_entries02 == []
    assert decoded.references.ref07 == _ref(7)


def test_cspn_round_trip(make_key, roundtrip) -> None:
    """Test spandrel entry lists and references."""
    resource = CspnResource(
        key=make_key(CspnResource.TYPE_ID),
        modl_entries04=[ModlEntry(label=0xFFFF, reference=_ref(4))],
        references=Gp7References(ref03=_ref(3)),
        colors=[1, 2, 3],
    )
    assert roundtrip(resource) == resource


def test_cwal_round_trip(make_key, roundtrip) -> None:
    """Test wall material entries and corner image groups."""
    resource = CwalResource(
        key=make_key(CwalResource.TYPE_ID),
        matd_entries=[WallMatdEntry(height=height, reference=_ref(height)) for height in MainWallHeight],
        img_groups=[WallImgGroup(height=CornerWallHeight.TALL, diffuse=_ref(1), bump=_ref(2), specular=_ref(3))],
        cornering_factor=0x3F800000,
        colors=[0xFF000000],
        swatch_grouping=0x55,
    )
    decoded = roundtrip(resource)

    assert [entry.height for entry in decoded.matd_entries] == [3, 4, 5]
    assert decoded.img_groups[0].height == 0xC5
    assert decoded.img_groups[0].specular == _ref(3)


def test_cstr_round_trip(make_key, roundtrip) -> None:
    """Test stairs hashes, six references and trailing unknowns."""
    resource = CstrResource(key=make_key(CstrResource.TYPE_ID), hash_indicator=2, hash01=0x11111111, unk05=0x55)
    resource.references.ref06 = _ref(6)
    resource.header.common.name_hash = 0x11223344

    decoded = roundtrip(resource)
    assert decoded.hash01 == 0x11111111
    assert decoded.references.ref06 == _ref(6)
    assert decoded.unk05 == 0x55


def test_cstl_has_25_references(make_key, roundtrip) -> None:
    """Test stair style stores exactly 25 references in order."""
    resource = CstlResource(key=make_key(CstlResource.TYPE_ID))
    assert len(resource.references) == CSTL_REFERENCE_COUNT

    resource.references = [_ref(i) for i in range(CSTL_REFERENCE_COUNT)]
    assert roundtrip(resource).references == resource.references


def test_cstl_wrong_reference_count(make_key) -> None:
    """Test encoding a stair style with the wrong number of references fails."""
    resource = CstlResource(key=make_key(CstlResource.TYPE_ID), references=[_ref(1)])

    with pytest.raises(ValueError):
        resource.encode()


def test_cfrz_trim_block(make_key) -> None:
    """Test indicator 1 stores only the trim references."""
    key = make_key(CfrzResource.TYPE_ID)
    resource = CfrzResource(key=key, references_indicator=1, trim_references=Gp4References(ref02=_ref(2)))

    decoded = CfrzResource.decode(key, resource.encode())
    assert decoded.trim_references == Gp4References(ref02=_ref(2))
    assert decoded.model_references is None
    assert decoded.encode() == resource.encode()


def test_cfrz_model_block(make_key) -> None:
    """Test indicator 0 stores only the model references."""
    key = make_key(CfrzResource.TYPE_ID)
    resource = CfrzResource(
        key=key,
        references_indicator=0,
        trim_references=Gp4References(ref01=_ref(1)),
        model_references=Gp8References(ref08=_ref(8)),
    )
    data = resource.encode()

    decoded = CfrzResource.decode(key, data)
    assert decoded.model_references == Gp8References(ref08=_ref(8))
    assert decoded.trim_references is None
    # Only one block is on the wire
    assert len(data) == len(CfrzResource(key=key).encode())


def test_cfrz_blocks_differ_in_size(make_key) -> None:
    """Test the two blocks have different lengths on the wire."""
    key = make_key(CfrzResource.TYPE_ID)
    trim = CfrzResource(key=key, references_indicator=1).encode()
    model = CfrzResource(key=key, references_indicator=0).encode()

    assert len(model) - len(trim) == 16 * 4


def test_cblk_version_gate(make_key) -> None:
    """Test the extended block is absent at 9 and present at 10."""
    key = make_key(CblkResource.TYPE_ID)
    old = CblkResource(key=key, unk02=0x77, unk_list=[1, 2])
    old.header.version = 9
    new = CblkResource(key=key, unk02=0x77, unk_list=[1, 2])
    new.header.version = 10

    old_data = old.encode()
    new_data = new.encode()
    assert len(new_data) - len(old_data) == 4 + 2 + 4 * 2

    old_decoded = CblkResource.decode(key, old_data)
    assert old_decoded.unk02 == 0
    assert old_decoded.unk_list == []
    new_decoded = CblkResource.decode(key, new_data)
    assert new_decoded.unk02 == 0x77
    assert new_decoded.unk_list == [1, 2]


def test_cblk_block_written_when_default(make_key) -> None:
    """Test the gated block is on the wire at version 10 even with default values."""
    key = make_key(CblkResource.TYPE_ID)
    resource = CblkResource(key=key)
    resource.header.version = 10
    legacy = CblkResource(key=key)
    legacy.header.version = 9

    assert len(resource.encode()) - len(legacy.encode()) == 6
