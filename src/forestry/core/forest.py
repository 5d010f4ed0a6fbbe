"""Resolved forest and its query projections.

A Forest is produced by ForestBuilder.build() and never changes after
construction. It holds every node in depth-first order: all linked trees
first, then all unlinked clusters, each group ordered by the input
position of its root or base.
"""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterator, Mapping

from forestry.core.node import Node


class Shape(Enum):
    """Projection of a query result."""

    TREE = "tree"  # Top-level nodes only, subtrees attached via children
    LINEAR = "linear"  # Every node individually, in pre-order


class Priority(Enum):
    """Which group comes first when linked and unlinked nodes are combined."""

    LINKED_FIRST = "linked"
    UNLINKED_FIRST = "unlinked"


def _is_tree(shape: Shape | str | None) -> bool:
    """Any shape other than TREE (or None) is treated as LINEAR."""
    if shape is None:
        return True
    if isinstance(shape, Shape):
        return shape is Shape.TREE
    return shape == Shape.TREE.value


def _coerce_priority(priority: Priority | str | None) -> Priority:
    if priority is None:
        return Priority.LINKED_FIRST
    if isinstance(priority, Priority):
        return priority
    return Priority(priority)


class Forest:
    """The complete resolved forest.

    Query methods return new ordered dicts keyed by node id; mutating a
    returned dict does not affect the forest.

    Example:
        forest = build_forest(records)
        for node in forest.linked(Shape.TREE).values():
            print(node.id, node.depth_of_subtree())
    """

    def __init__(self, nodes: Mapping[Hashable, Node]) -> None:
        """Initialize from nodes already in depth-first order."""
        self._nodes: dict[Hashable, Node] = dict(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"Forest(nodes={len(self._nodes)})"

    def get(self, node_id: Hashable) -> Node | None:
        """Find node by id.

        Args:
            node_id: The id to look up.

        Returns:
            The matching Node, or None if not found.
        """
        return self._nodes.get(node_id)

    def ids(self) -> list[Hashable]:
        """Return all node ids in depth-first order."""
        return list(self._nodes)

    def linked(self, shape: Shape | str | None = Shape.TREE) -> dict[Hashable, Node]:
        """Return nodes belonging to a rooted tree.

        Args:
            shape: TREE returns only roots; LINEAR returns every linked node.

        Returns:
            Ordered dict of node id to Node.
        """
        if _is_tree(shape):
            return {nid: n for nid, n in self._nodes.items() if n.root is n}
        return {nid: n for nid, n in self._nodes.items() if n.root is not None}

    def unlinked(self, shape: Shape | str | None = Shape.TREE) -> dict[Hashable, Node]:
        """Return nodes whose chain never reaches a genuine root.

        Args:
            shape: TREE returns only unlinked bases; LINEAR returns every
                unlinked node.

        Returns:
            Ordered dict of node id to Node.
        """
        if _is_tree(shape):
            return {
                nid: n for nid, n in self._nodes.items() if n.root is None and n.base is n
            }
        return {nid: n for nid, n in self._nodes.items() if n.root is None}

    def both(
        self,
        shape: Shape | str | None = Shape.TREE,
        priority: Priority | str | None = Priority.LINKED_FIRST,
    ) -> dict[Hashable, Node]:
        """Return linked and unlinked nodes together.

        Args:
            shape: Projection applied to both groups.
            priority: Which group comes first.

        Returns:
            Ordered dict of node id to Node. The two groups are disjoint.
        """
        first, last = self.linked(shape), self.unlinked(shape)
        if _coerce_priority(priority) is Priority.UNLINKED_FIRST:
            first, last = last, first
        first.update(last)
        return first
