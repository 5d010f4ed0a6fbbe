"""Pytest fixtures shared by the forestry tests."""

import pytest

from forestry.core.records import Record


def _record(node_id, parent_id, title):
    return Record(id=node_id, parent_id=parent_id, payload={"title": title})


@pytest.fixture
def collection_a():
    """Three linked trees followed by two unlinked chains, out of order."""
    return [
        _record(10, None, "A"),
        _record(110, None, "B"),
        _record(130, None, "C"),
        _record(20, 10, "A.1"),
        _record(30, 10, "A.2"),
        _record(40, 30, "A.2.I"),
        _record(50, 30, "A.2.II"),
        _record(60, 30, "A.2.III"),
        _record(70, 60, "A.2.III.a"),
        _record(80, 60, "A.2.III.b"),
        _record(90, 10, "A.3"),
        _record(100, 90, "A.3.I"),
        _record(120, 110, "B.1"),
        # Unlinked: parents 210 and 250 are not in the set.
        _record(220, 210, "4"),
        _record(260, 250, "5"),
        _record(230, 220, "4.I"),
        _record(240, 220, "4.II"),
        _record(270, 260, "5.I"),
    ]


@pytest.fixture
def collection_b():
    """A single chain given leaf first."""
    return [
        _record(3, 2, "Level 3"),
        _record(2, 1, "Level 2"),
        _record(1, None, "Level 1"),
    ]


@pytest.fixture
def collection_c():
    """A record that declares itself as its own parent."""
    return [_record(1, 1, "Own Parent?")]


@pytest.fixture
def small_collection():
    """Two trees, the first two levels deep."""
    return [
        _record(1, None, "A"),
        _record(2, 1, "A.1"),
        _record(3, 1, "A.2"),
        _record(4, 3, "A.2.I"),
        _record(5, 3, "A.2.II"),
        _record(6, None, "B"),
    ]
