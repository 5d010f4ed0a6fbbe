"""
forestry.core - Node model, forest resolution and query projections
"""

from forestry.core.errors import (
    ConfigError,
    CyclicReferenceError,
    DuplicateIdentifierError,
    ForestError,
    MissingFieldError,
)
from forestry.core.forest import Forest, Priority, Shape
from forestry.core.forest_builder import ForestBuilder, build_forest
from forestry.core.forest_schema import ForestSchema
from forestry.core.node import Node
from forestry.core.records import Record

__all__ = [
    "ConfigError",
    "CyclicReferenceError",
    "DuplicateIdentifierError",
    "Forest",
    "ForestBuilder",
    "ForestError",
    "ForestSchema",
    "MissingFieldError",
    "Node",
    "Priority",
    "Record",
    "Shape",
    "build_forest",
]
