"""
Pytest configuration and shared fixtures.
"""

from typing import Callable

import pytest

from s4catalog.model.primitives import ResourceKey


TEST_GROUP = 0x00000000
TEST_INSTANCE = 0x0123456789ABCDEF


@pytest.fixture()
def make_key() -> Callable[[int], ResourceKey]:
    """Return a factory building a resource key for a given type id."""

    def factory(type_id: int) -> ResourceKey:
        return ResourceKey(type=type_id, group=TEST_GROUP, instance=TEST_INSTANCE)

    return factory


@pytest.fixture()
def roundtrip() -> Callable:
    """Return a helper that encodes a resource, decodes it again and re-encodes.

    The helper asserts byte equality of both encodings and returns the
    decoded copy.
    """

    def check(resource):
        data = resource.encode()
        decoded = type(resource).decode(resource.key, data)
        assert decoded.encode() == data
        return decoded

    return check
