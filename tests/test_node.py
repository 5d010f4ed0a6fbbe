"""Tests for core/node.py - Forest node data structure."""

import pytest

from forestry.core.forest_builder import build_forest
from forestry.core.forest import Shape
from forestry.core.node import Node

from tests.forest_test_helpers import ids


@pytest.fixture
def linked_nodes():
    """A.1, A.2 (with A.2.I and A.2.II) under A, plus B; wired by hand."""
    node_a = Node(id=1, parent_id=None)
    node_a1 = Node(id=2, parent_id=1)
    node_a2 = Node(id=3, parent_id=1)
    node_a2i = Node(id=4, parent_id=3)
    node_a2ii = Node(id=5, parent_id=3)
    node_b = Node(id=6, parent_id=None)

    node_a.set_parent(None)
    node_a.set_children([node_a1, node_a2])
    node_a1.set_parent(node_a)
    node_a2.set_parent(node_a)
    node_a2.set_children([node_a2i, node_a2ii])
    node_a2i.set_parent(node_a2)
    node_a2ii.set_parent(node_a2)
    node_b.set_parent(None)

    return {1: node_a, 2: node_a1, 3: node_a2, 4: node_a2i, 5: node_a2ii, 6: node_b}


class TestConstruct:
    """Tests for Node construction."""

    def test_parentless_node_is_own_root(self):
        """A record without parent roots its own tree."""
        node = Node(id=1, parent_id=None)
        assert node.root is node

    def test_node_with_parent_has_no_root_yet(self):
        """set_parent() fills root for nodes that declare a parent."""
        node = Node(id=2, parent_id=1)
        assert node.root is None
        assert node.base is None
        assert node.children is None

    def test_self_parent_is_never_a_root(self):
        node = Node(id=1, parent_id=1)
        assert node.root is None

    def test_nodes_compare_by_identity(self):
        assert Node(id=1) != Node(id=1)

    def test_repr_omits_relationships(self, linked_nodes):
        text = repr(linked_nodes[2])
        assert "id=2" in text
        assert "parent=" not in text


class TestSetParent:
    """Tests for set_parent()."""

    def test_linked_chain(self):
        node_a = Node(id=1, parent_id=None)
        node_a1 = Node(id=2, parent_id=1)
        node_a1i = Node(id=3, parent_id=2)

        node_a.set_parent(None)
        assert node_a.parent is None
        assert node_a.root is node_a
        assert node_a.base is node_a

        node_a1.set_parent(node_a)
        assert node_a1.parent is node_a
        assert node_a1.root is node_a
        assert node_a1.base is node_a

        node_a1i.set_parent(node_a1)
        assert node_a1i.parent is node_a1
        assert node_a1i.root is node_a
        assert node_a1i.base is node_a

    def test_unlinked(self):
        """A node whose parent cannot be resolved becomes an unlinked base."""
        node = Node(id=4, parent_id=1)
        node.set_parent(None)

        assert node.parent is None
        assert node.root is None
        assert node.base is node


class TestSetChildren:
    """Tests for set_children()."""

    def test_empty_leaves_children_absent(self):
        node = Node(id=1)
        node.set_children([])
        assert node.children is None
        assert list(node.iter_children()) == []

    def test_stores_children_in_order(self):
        node = Node(id=1)
        child_a, child_b = Node(id=2, parent_id=1), Node(id=3, parent_id=1)
        node.set_children([child_a, child_b])
        assert node.children == [child_a, child_b]


class TestDistance:
    """Tests for distance_to_base() and distance_to_root()."""

    @pytest.mark.parametrize(
        "node_id,expected",
        [(1, 0), (2, 1), (3, 1), (4, 2), (5, 2), (6, 0)],
    )
    def test_linked_distances(self, linked_nodes, node_id, expected):
        node = linked_nodes[node_id]
        assert node.distance_to_base() == expected
        assert node.distance_to_root() == expected

    def test_distance_is_cached(self, linked_nodes):
        node = linked_nodes[4]
        assert node.distance_to_base() == 2
        # Detaching afterwards does not change the cached value.
        node.parent = None
        assert node.distance_to_base() == 2

    def test_unlinked_has_no_distance_to_root(self):
        base = Node(id=10, parent_id=99)
        child = Node(id=11, parent_id=10)
        base.set_parent(None)
        child.set_parent(base)

        assert child.distance_to_base() == 1
        assert child.distance_to_root() is None
        assert base.distance_to_root() is None


class TestDepthOfSubtree:
    """Tests for depth_of_subtree()."""

    def test_depths(self):
        records = [
            {"id": 1, "parent_id": None},
            {"id": 2, "parent_id": 1},
            {"id": 3, "parent_id": 2},
            {"id": 4, "parent_id": 2},
            {"id": 5, "parent_id": 2},
            {"id": 6, "parent_id": 4},
            {"id": 7, "parent_id": 6},
        ]
        nodes = build_forest(records).linked(Shape.LINEAR)

        assert nodes[1].depth_of_subtree() == 4
        assert nodes[2].depth_of_subtree() == 3
        assert nodes[3].depth_of_subtree() == 0
        assert nodes[4].depth_of_subtree() == 2
        assert nodes[5].depth_of_subtree() == 0
        assert nodes[6].depth_of_subtree() == 1
        assert nodes[7].depth_of_subtree() == 0

    def test_deep_chain(self):
        """Long chains do not hit the recursion limit."""
        records = [{"id": i, "parent_id": i - 1 if i else None} for i in range(5000)]
        forest = build_forest(records)

        assert forest.get(0).depth_of_subtree() == 4999
        assert forest.get(4000).depth_of_subtree() == 999
        assert forest.get(4999).depth_of_subtree() == 0


class TestDescendants:
    """Tests for descendants()."""

    def test_all_descendants(self, linked_nodes):
        assert ids(linked_nodes[1].descendants()) == [2, 3, 4, 5]

    def test_all_descendants_with_self(self, linked_nodes):
        assert ids(linked_nodes[1].descendants(None, True)) == [1, 2, 3, 4, 5]

    def test_zero_depth(self, linked_nodes):
        node = linked_nodes[1]
        assert node.descendants(0, False) == []
        assert node.descendants(0, True) == [node]

    def test_one_level(self, linked_nodes):
        assert ids(linked_nodes[1].descendants(1, False)) == [2, 3]
        assert ids(linked_nodes[1].descendants(1, True)) == [1, 2, 3]

    def test_two_levels_reaches_grandchildren(self, linked_nodes):
        assert ids(linked_nodes[1].descendants(2)) == [2, 3, 4, 5]

    def test_negative_depth_yields_nothing(self, linked_nodes):
        assert linked_nodes[1].descendants(-1, True) == []

    def test_leaf(self, linked_nodes):
        assert linked_nodes[6].descendants() == []

    def test_deep_chain(self):
        """Long chains do not hit the recursion limit."""
        records = [{"id": i, "parent_id": i - 1 if i else None} for i in range(5000)]
        forest = build_forest(records)
        root = forest.get(0)

        assert len(root.descendants()) == 4999
        assert forest.get(4999).distance_to_base() == 4999


class TestAncestors:
    """Tests for ancestors()."""

    def test_nearest_first(self, linked_nodes):
        assert ids(linked_nodes[4].ancestors()) == [3, 1]

    def test_base_has_none(self, linked_nodes):
        assert list(linked_nodes[1].ancestors()) == []


class TestIsMethods:
    """Tests for is_linked(), is_root() and is_base()."""

    def test_root(self, linked_nodes):
        node = linked_nodes[1]
        assert node.is_linked()
        assert node.is_base()
        assert node.is_root()

    def test_linked_descendant(self, linked_nodes):
        node = linked_nodes[4]
        assert node.is_linked()
        assert not node.is_base()
        assert not node.is_root()

    def test_unlinked_base(self):
        node = Node(id=4, parent_id=1)
        node.set_parent(None)

        assert not node.is_linked()
        assert node.is_base()
        assert not node.is_root()
