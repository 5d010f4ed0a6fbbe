"""Forest Serialization - Export a Forest to JSON-compatible dicts and text.

These functions read the resolved node graph only; they never modify it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from forestry.core.forest import Priority, Shape

if TYPE_CHECKING:
    from forestry.core.forest import Forest
    from forestry.core.node import Node


def serialize_node(node: Node) -> dict[str, Any]:
    """Serialize a Node to a JSON-compatible dict.

    Args:
        node: The node to serialize.

    Returns:
        Dict suitable for JSON serialization. Relationships are given as
        ids so the result contains no reference cycles.
    """
    result: dict[str, Any] = {
        "id": node.id,
        "parent_id": node.parent_id,
        "linked": node.is_linked(),
        "is_root": node.is_root(),
        "is_base": node.is_base(),
        "root": node.root.id if node.root is not None else None,
        "base": node.base.id if node.base is not None else None,
        "distance": node.distance_to_base(),
        "distance_to_root": node.distance_to_root(),
    }

    children = list(node.iter_children())
    if children:
        result["children"] = [child.id for child in children]

    return result


def serialize_forest(forest: Forest) -> dict[str, Any]:
    """Serialize a Forest to a JSON-compatible dict.

    Args:
        forest: The forest to serialize.

    Returns:
        Dict with nodes (in depth-first order), roots, bases and metadata.
    """
    nodes = {node.id: serialize_node(node) for node in forest}
    roots = list(forest.linked(Shape.TREE))
    bases = list(forest.unlinked(Shape.TREE))
    return {
        "nodes": nodes,
        "roots": roots,
        "bases": bases,
        "metadata": {
            "node_count": len(nodes),
            "root_count": len(roots),
            "base_count": len(bases),
            "unlinked_count": len(forest.unlinked(Shape.LINEAR)),
        },
    }


def to_outline(
    forest: Forest,
    label: Callable[[Node], str] | None = None,
    priority: Priority | str = Priority.LINKED_FIRST,
    indent: str = "  ",
) -> str:
    """Render the forest as an indented text outline.

    Args:
        forest: The forest to render.
        label: Returns the text for a node; defaults to its id.
        priority: Whether linked or unlinked trees come first.
        indent: String repeated once per level of depth.

    Returns:
        One line per node, trees in depth-first order.
    """
    if label is None:
        label = _default_label

    lines = []
    for top in forest.both(Shape.TREE, priority).values():
        for node in top.descendants(include_self=True):
            lines.append(f"{indent * node.distance_to_base()}{label(node)}")
    return "\n".join(lines)


def _default_label(node: Node) -> str:
    return str(node.id)
