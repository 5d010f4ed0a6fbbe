"""Forest node data structure.

A Node wraps exactly one input record and carries the relationships
resolved for it:

- parent: the node this record declares as its parent (upward, non-owning)
- root: the top of a genuinely rooted tree, None for unlinked nodes
- base: the topmost reachable ancestor, linked or not
- children: the nodes declaring this one as parent (the only owning edge)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator


@dataclass(eq=False)
class Node:
    """A node in a resolved forest.

    Nodes compare by identity. Relationship fields are excluded from repr
    since they form reference cycles.

    Attributes:
        id: Identifier read from the record.
        parent_id: Declared parent identifier, None when parentless.
        record: The wrapped record, carried through untouched.
        parent: Resolved parent node.
        root: Root of the tree this node belongs to, or None if unlinked.
        base: Topmost reachable ancestor (self for roots and unlinked bases).
        children: Child nodes in input order, None when there are none.
    """

    id: Hashable
    parent_id: Hashable | None = None
    record: Any = None
    parent: Node | None = field(default=None, init=False, repr=False)
    root: Node | None = field(default=None, init=False, repr=False)
    base: Node | None = field(default=None, init=False, repr=False)
    children: list[Node] | None = field(default=None, init=False, repr=False)
    _distance: int | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        # Only a genuinely parentless record roots a tree; a self-parent
        # declares a parent and so never becomes a root.
        if self.parent_id is None:
            self.root = self

    def set_parent(self, parent: Node | None) -> None:
        """Attach this node to its resolved parent.

        Args:
            parent: The parent node, or None when the record has no
                resolvable parent. A None parent makes this node its own
                base; the root stays as decided at construction.
        """
        self._distance = None
        if parent is not None:
            self.parent = parent
            self.root = parent.root
            self.base = parent.base
        else:
            self.parent = None
            self.base = self

    def set_children(self, children: list[Node]) -> None:
        """Store children, leaving the field None when there are none."""
        if children:
            self.children = list(children)

    def iter_children(self) -> Iterator[Node]:
        """Iterate over child nodes."""
        if self.children:
            yield from self.children

    def ancestors(self) -> Iterator[Node]:
        """Iterate upward through parents, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth_of_subtree(self) -> int:
        """Return the maximum nesting depth below this node, 0 for a leaf."""
        deepest = 0
        stack: list[tuple[Node, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.children:
                stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def distance_to_base(self) -> int:
        """Return the number of parent hops up to the base.

        Computed on first call and cached.
        """
        if self._distance is None:
            self._distance = sum(1 for _ in self.ancestors())
        return self._distance

    def distance_to_root(self) -> int | None:
        """Return the distance to the root, or None for unlinked nodes."""
        return self.distance_to_base() if self.root is not None else None

    def descendants(self, max_depth: int | None = None, include_self: bool = False) -> list[Node]:
        """Collect descendants in depth-first pre-order.

        Args:
            max_depth: Maximum number of hops below this node; None means
                unlimited and a negative value yields nothing.
            include_self: Whether to emit this node first. Nodes below it
                are always emitted.

        Returns:
            Nodes in pre-order, siblings in input order.
        """
        result: list[Node] = []
        stack: list[tuple[Node, int | None, bool]] = [(self, max_depth, include_self)]
        while stack:
            node, budget, emit = stack.pop()
            if budget is not None and budget < 0:
                continue
            if emit:
                result.append(node)
            next_budget = None if budget is None else budget - 1
            if node.children:
                stack.extend((child, next_budget, True) for child in reversed(node.children))
        return result

    def is_linked(self) -> bool:
        """True if this node belongs to a genuinely rooted tree."""
        return self.root is not None

    def is_root(self) -> bool:
        """True if this node is the root of its tree.

        Unlinked nodes are never roots; use is_base() for the topmost
        node of an unlinked chain.
        """
        return self.root is self

    def is_base(self) -> bool:
        """True if this node is the top of its chain, linked or not."""
        return self.base is self
