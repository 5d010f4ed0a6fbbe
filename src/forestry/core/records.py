"""
forestry.core.records - Input records and linking-field access.

The core reads exactly two fields from each record: its identifier and its
parent identifier. Records can be any object exposing those fields either
as attributes or as mapping keys, so ORM rows, dataclasses and plain dicts
all work without conversion.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional

from forestry.core.errors import MissingFieldError

_REQUIRED = object()


@dataclass
class Record:
    """
    Minimal record for callers that have no record type of their own.

    Attributes:
        id: Unique identifier
        parent_id: Identifier of the parent record, None for "no parent"
        payload: Arbitrary extra data, carried through untouched
    """

    id: Hashable
    parent_id: Optional[Hashable] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.payload[key]


def get_field(record: Any, name: str, default: Any = _REQUIRED) -> Any:
    """Read a linking field from a record.

    Mapping records are looked up by key, everything else by attribute.

    Args:
        record: The record to read from
        name: Field name
        default: Value returned when the field is missing; if omitted,
            a missing field raises MissingFieldError

    Returns:
        The field value
    """
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
    elif hasattr(record, name):
        return getattr(record, name)

    if default is _REQUIRED:
        raise MissingFieldError(record, name)
    return default
