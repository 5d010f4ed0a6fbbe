"""
Parent-link resolution utilities.

Centralized functions over the child -> parent mapping of a record set:
- Effective parent computation (self and missing references dropped)
- Cycle detection and deterministic cycle breaking
- Topological ordering (parents before children)
- Children index construction

Every function here is pure: inputs are never mutated.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Mapping, Optional, Set

from forestry.core.errors import CyclicReferenceError
from forestry.core.node import Node

ParentMap = Dict[Hashable, Optional[Hashable]]


@dataclass
class CycleInfo:
    """Pure data structure for cycle detection results."""

    cycle_members: Set[Hashable] = field(default_factory=set)
    cycle_paths: List[List[Hashable]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.cycle_paths)


# -----------------------------------------------------------------------------
# Effective Parents
# -----------------------------------------------------------------------------


def effective_parents(nodes: Mapping[Hashable, Node]) -> ParentMap:
    """Map each node id to the id of the node it actually links to.

    A node links to nothing when its parent_id is None, equals its own id
    (a one-hop cycle), or names a record that is not in the set.

    Args:
        nodes: Mapping of node id to Node, in input order

    Returns:
        Dict of node id -> parent id or None, in input order
    """
    parents: ParentMap = {}
    for node_id, node in nodes.items():
        parent_id = node.parent_id
        if parent_id is None or parent_id == node_id or parent_id not in nodes:
            parents[node_id] = None
        else:
            parents[node_id] = parent_id
    return parents


# -----------------------------------------------------------------------------
# Cycle Detection
# -----------------------------------------------------------------------------


def detect_cycles(parents: Mapping[Hashable, Optional[Hashable]]) -> CycleInfo:
    """Detect parent cycles of two or more hops. PURE - no mutation.

    Each id has at most one parent, so the DFS degenerates into walking
    each chain upward until it reaches a finished id, a parentless id, or
    an id already on the current path (a cycle).

    Args:
        parents: Mapping of id -> effective parent id

    Returns:
        CycleInfo; each path lists the cycle in walk order and repeats
        its first id at the end
    """
    visited: Set[Hashable] = set()
    cycle_members: Set[Hashable] = set()
    cycle_paths: List[List[Hashable]] = []

    for start in parents:
        if start in visited:
            continue

        path: List[Hashable] = []
        rec_stack: Set[Hashable] = set()
        current: Optional[Hashable] = start
        while current is not None and current not in visited:
            visited.add(current)
            rec_stack.add(current)
            path.append(current)
            current = parents.get(current)

        if current is not None and current in rec_stack:
            cycle = path[path.index(current) :]
            cycle_paths.append(cycle + [current])
            cycle_members.update(cycle)

    return CycleInfo(cycle_members=cycle_members, cycle_paths=cycle_paths)


def break_cycles(
    parents: Mapping[Hashable, Optional[Hashable]],
    cycles: CycleInfo,
) -> ParentMap:
    """Drop one parent link per cycle so the mapping becomes acyclic.

    The member appearing first in input order loses its parent and becomes
    the base of the resulting unlinked cluster.

    Args:
        parents: Mapping of id -> effective parent id
        cycles: Result of detect_cycles() on the same mapping

    Returns:
        New mapping with the cycles broken
    """
    position = {node_id: index for index, node_id in enumerate(parents)}
    broken = dict(parents)
    for path in cycles.cycle_paths:
        first = min(path[:-1], key=position.__getitem__)
        broken[first] = None
    return broken


# -----------------------------------------------------------------------------
# Ordering
# -----------------------------------------------------------------------------


def topological_order(parents: Mapping[Hashable, Optional[Hashable]]) -> List[Hashable]:
    """Order ids so that every parent precedes its children.

    Single pass: for each id in input order, the not-yet-ordered part of
    its ancestor chain is emitted top-down.

    Args:
        parents: Acyclic mapping of id -> effective parent id

    Returns:
        List of ids

    Raises:
        CyclicReferenceError: If the mapping still contains a cycle
    """
    ordered: List[Hashable] = []
    done: Set[Hashable] = set()

    for start in parents:
        chain: List[Hashable] = []
        on_chain: Set[Hashable] = set()
        current: Optional[Hashable] = start
        while current is not None and current not in done:
            if current in on_chain:
                cycle = chain[chain.index(current) :]
                raise CyclicReferenceError([cycle + [current]])
            on_chain.add(current)
            chain.append(current)
            current = parents.get(current)

        for node_id in reversed(chain):
            ordered.append(node_id)
            done.add(node_id)

    return ordered


def build_children_index(
    parents: Mapping[Hashable, Optional[Hashable]],
) -> Dict[Hashable, List[Hashable]]:
    """Build parent_id -> [child_ids] mapping.

    Children keep their input order.

    Args:
        parents: Mapping of id -> effective parent id

    Returns:
        Dict mapping each parent id to its child ids
    """
    index: Dict[Hashable, List[Hashable]] = {}
    for node_id, parent_id in parents.items():
        if parent_id is not None:
            index.setdefault(parent_id, []).append(node_id)
    return index
