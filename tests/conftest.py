import pytest

from objectsize.sys import unregister_sizeof


@pytest.fixture
def table_sizer():
    """Build a size oracle answering from a `{type: size}` table; types
    missing from the table are zero-sized."""

    def make(sizes):
        return lambda obj: sizes.get(type(obj), 0)

    return make


@pytest.fixture
def registered_types():
    """Types appended to the yielded list are unregistered afterwards."""
    types = []
    yield types
    for tp in types:
        unregister_sizeof(tp)
