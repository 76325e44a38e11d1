"""
Tests for counted list codecs.
"""

import pytest

from s4catalog.io.reader import Reader
from s4catalog.io.writer import Writer
from s4catalog.model import lists
from s4catalog.model.lists import SellingPoint
from s4catalog.model.primitives import TgiReference


def _encode(write, *args) -> bytes:
    writer = Writer()
    write(writer, *args)
    return writer.to_bytes()


@pytest.mark.parametrize('count', [0, 1, 3])
def test_colors_fidelity(count: int) -> None:
    """Test colors keep count, order and values."""
    colors = [0xFF000000 + i * 0x10101 for i in range(count)]
    data = _encode(lists.write_colors, colors)

    assert len(data) == lists.colors_size(colors)
    assert data[0] == count
    assert lists.read_colors(Reader(data)) == colors


@pytest.mark.parametrize('count', [0, 1, 3])
def test_selling_points_fidelity(count: int) -> None:
    """Test selling points keep signed amounts."""
    points = [SellingPoint(commodity=0xAAAA + i, amount=-100 * i) for i in range(count)]
    data = _encode(lists.write_selling_points, points)

    assert len(data) == lists.selling_points_size(points)
    assert lists.read_selling_points(Reader(data)) == points


def test_selling_points_unsigned_variant() -> None:
    """Test the object-style variant stores amounts as unsigned."""
    points = [SellingPoint(commodity=1, amount=0xFFFFFFFF)]
    data = _encode(lists.write_selling_points, points, False)

    assert lists.read_selling_points(Reader(data), signed=False) == points
    assert lists.read_selling_points(Reader(data))[0].amount == -1


@pytest.mark.parametrize('count', [0, 1, 3])
def test_tgi_list_fidelity(count: int) -> None:
    """Test byte-counted TGI lists."""
    references = [TgiReference(type=i, group=i + 1, instance=i + 2) for i in range(count)]
    data = _encode(lists.write_tgi_list, references)

    assert len(data) == 1 + 16 * count
    assert lists.read_tgi_list(Reader(data)) == references


def test_tgi_list_u32_count() -> None:
    """Test TGI lists with a 4-byte count."""
    references = [TgiReference(type=7, group=8, instance=9)]
    data = _encode(lists.write_tgi_list, references, 4)

    assert data[:4] == b'\x01\x00\x00\x00'
    assert lists.read_tgi_list(Reader(data), 4) == references


def test_tgi_array_requires_exact_length() -> None:
    """Test fixed-length arrays refuse the wrong number of references."""
    with pytest.raises(ValueError):
        _encode(lists.write_tgi_array, [TgiReference.empty()], 2)


@pytest.mark.parametrize('count', [0, 1, 3])
def test_tags_v11_fidelity(count: int) -> None:
    """Test 32-bit tag list."""
    tags = [0x10000 + i for i in range(count)]
    data = _encode(lists.write_tags_v11, tags)

    assert len(data) == 4 + 4 * count == lists.tags_size(tags, wide=True)
    assert lists.read_tags_v11(Reader(data)) == tags


@pytest.mark.parametrize('count', [0, 1, 3])
def test_tags_legacy_fidelity(count: int) -> None:
    """Test 16-bit tag list."""
    tags = [0xFFFF - i for i in range(count)]
    data = _encode(lists.write_tags_legacy, tags)

    assert len(data) == 2 + 2 * count == lists.tags_size(tags, wide=False)
    assert lists.read_tags_legacy(Reader(data)) == tags


def test_tag_encodings_are_incompatible() -> None:
    """Test the same tags produce different bytes per encoding."""
    tags = [1, 2]

    assert _encode(lists.write_tags, tags, True) == b'\x02\x00\x00\x00\x01\x00\x00\x00\x02\x00\x00\x00'
    assert _encode(lists.write_tags, tags, False) == b'\x02\x00\x01\x00\x02\x00'


def test_object_tags() -> None:
    """Test object-style tags: 32-bit count, 16-bit values."""
    data = _encode(lists.write_object_tags, [0xFFFF])

    assert data == b'\x01\x00\x00\x00\xff\xff'
    assert lists.read_object_tags(Reader(data)) == [0xFFFF]


def test_uint32_list() -> None:
    """Test unknown u32 lists have a 16-bit count."""
    data = _encode(lists.write_uint32_list, [1, 2, 3])

    assert data[:2] == b'\x03\x00'
    assert lists.read_uint32_list(Reader(data)) == [1, 2, 3]
