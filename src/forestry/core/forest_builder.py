"""Forest builder for resolving flat record sets.

This module provides the ForestBuilder class, which turns records carrying
an id and an optional parent id, in any order, into a resolved Forest.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable

from forestry.core.errors import CyclicReferenceError, DuplicateIdentifierError
from forestry.core.forest import Forest
from forestry.core.forest_schema import ForestSchema
from forestry.core.hierarchy import (
    break_cycles,
    build_children_index,
    detect_cycles,
    effective_parents,
    topological_order,
)
from forestry.core.node import Node
from forestry.core.records import get_field

logger = logging.getLogger(__name__)


class ForestBuilder:
    """Collects records and resolves them into a Forest.

    The builder is the unresolved phase: it only holds records. Calling
    build() performs the whole resolution and returns an immutable Forest;
    the builder itself keeps no resolved state, so every build() resolves
    independently and yields a structurally identical result.

    Example:
        builder = ForestBuilder(schema=ForestSchema(cycle_policy="unlinked"))
        builder.add_records(rows)
        forest = builder.build()
    """

    def __init__(
        self,
        records: Iterable[Any] = (),
        schema: ForestSchema | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            records: Initial records, in input order.
            schema: Resolution options (uses default if not provided).
        """
        self.schema = schema or ForestSchema.default()
        self._records: list[Any] = list(records)

    def add_records(self, records: Iterable[Any]) -> ForestBuilder:
        """Append records after those already added.

        Args:
            records: Records exposing the schema's id and parent fields.

        Returns:
            Self for method chaining.
        """
        self._records.extend(records)
        return self

    def build(self) -> Forest:
        """Resolve all records into a Forest.

        Returns:
            The resolved Forest.

        Raises:
            DuplicateIdentifierError: On duplicate ids with the "error" policy.
            CyclicReferenceError: On parent cycles with the "error" policy.
            MissingFieldError: If a record has no id field.
        """
        nodes = self._wrap_records()

        parents = effective_parents(nodes)
        cycles = detect_cycles(parents)
        if cycles:
            if self.schema.cycle_policy == "error":
                raise CyclicReferenceError(cycles.cycle_paths)
            for path in cycles.cycle_paths:
                logger.warning("Breaking parent cycle: %s", " -> ".join(map(str, path)))
            parents = break_cycles(parents, cycles)

        self._link(nodes, parents)
        ordered = self._order(nodes)

        logger.debug(
            "Resolved %d records: %d roots, %d unlinked bases",
            len(ordered),
            sum(1 for n in nodes.values() if n.is_root()),
            sum(1 for n in nodes.values() if not n.is_linked() and n.is_base()),
        )
        return Forest(ordered)

    def _wrap_records(self) -> dict[Hashable, Node]:
        """Wrap every record in a Node, indexed by id in input order."""
        id_field = self.schema.id_field
        parent_field = self.schema.parent_field

        nodes: dict[Hashable, Node] = {}
        for record in self._records:
            node = Node(
                id=get_field(record, id_field),
                parent_id=get_field(record, parent_field, None),
                record=record,
            )
            if node.id in nodes:
                if self.schema.duplicate_policy == "error":
                    raise DuplicateIdentifierError(node.id)
                logger.warning("Duplicate record id %r: keeping the last one", node.id)
            nodes[node.id] = node
        return nodes

    @staticmethod
    def _link(nodes: dict[Hashable, Node], parents: dict[Hashable, Hashable | None]) -> None:
        """Set parent, root, base and children, parents before children."""
        children_index = build_children_index(parents)
        for node_id in topological_order(parents):
            node = nodes[node_id]
            parent_id = parents[node_id]
            node.set_parent(nodes[parent_id] if parent_id is not None else None)
            node.set_children([nodes[cid] for cid in children_index.get(node_id, [])])

    @staticmethod
    def _order(nodes: dict[Hashable, Node]) -> dict[Hashable, Node]:
        """Flatten trees then unlinked clusters in depth-first pre-order."""
        ordered: dict[Hashable, Node] = {}
        tops = [n for n in nodes.values() if n.is_root()]
        tops += [n for n in nodes.values() if not n.is_linked() and n.is_base()]
        for top in tops:
            for node in top.descendants(include_self=True):
                ordered[node.id] = node
        return ordered


def build_forest(records: Iterable[Any], schema: ForestSchema | None = None) -> Forest:
    """Convenience function to resolve records into a forest.

    Args:
        records: Records exposing an id and an optional parent id.
        schema: Optional resolution options.

    Returns:
        Resolved Forest.
    """
    return ForestBuilder(records, schema=schema).build()
