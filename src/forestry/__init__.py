"""
forestry - Resolve flat parent-linked records into trees

A forest grows from scattered records: each knows only its own id and the
id of its parent. forestry links them into trees, separates the chains
that never reach a true root, and offers nested and flattened views.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("forestry")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from forestry.core import (
    ConfigError,
    CyclicReferenceError,
    DuplicateIdentifierError,
    Forest,
    ForestBuilder,
    ForestError,
    ForestSchema,
    MissingFieldError,
    Node,
    Priority,
    Record,
    Shape,
    build_forest,
)

__all__ = [
    "__version__",
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
