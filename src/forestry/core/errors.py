"""
forestry.core.errors - Exceptions raised while resolving a forest.
"""

from typing import Any, List


class ForestError(Exception):
    """Base class for all forestry errors."""


class DuplicateIdentifierError(ForestError, ValueError):
    """Two input records share the same identifier."""

    def __init__(self, node_id: Any):
        self.node_id = node_id
        super().__init__(f"Duplicate record id: {node_id!r}")


class CyclicReferenceError(ForestError):
    """Parent references form one or more cycles longer than one hop.

    Attributes:
        cycles: Cycle paths; each path repeats its first id at the end.
    """

    def __init__(self, cycles: List[List[Any]]):
        self.cycles = cycles
        rendered = "; ".join(" -> ".join(str(i) for i in path) for path in cycles)
        super().__init__(f"Cycle detected: {rendered}")


class MissingFieldError(ForestError, KeyError):
    """A record exposes neither an attribute nor a key for a linking field."""

    def __init__(self, record: Any, field_name: str):
        self.record = record
        self.field_name = field_name
        super().__init__(field_name)

    def __str__(self) -> str:
        return f"Record {self.record!r} has no field {self.field_name!r}"


class ConfigError(ForestError, ValueError):
    """Invalid forestry configuration."""
