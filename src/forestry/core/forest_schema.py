"""Schema-driven configuration for forest resolution.

ForestSchema collects the options that change how a record set is turned
into a forest: which record fields carry the linking identifiers, and how
duplicate identifiers and multi-hop parent cycles are handled. It can be
created with defaults or parsed from the ``[forest]`` table of a
.forestry.toml configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from forestry.core.errors import ConfigError

DUPLICATE_POLICIES = ("error", "last_wins")
CYCLE_POLICIES = ("error", "unlinked")


@dataclass(frozen=True)
class ForestSchema:
    """Options for resolving records into a forest.

    Attributes:
        id_field: Record field holding the identifier.
        parent_field: Record field holding the parent identifier.
        duplicate_policy: "error" rejects duplicate ids; "last_wins" keeps
            the last record at the position of the first.
        cycle_policy: "error" rejects parent cycles of two or more hops;
            "unlinked" breaks each cycle so it surfaces as one unlinked
            cluster.
    """

    id_field: str = "id"
    parent_field: str = "parent_id"
    duplicate_policy: str = "error"
    cycle_policy: str = "error"

    def __post_init__(self) -> None:
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"Unknown duplicate_policy '{self.duplicate_policy}'; "
                f"expected one of {', '.join(DUPLICATE_POLICIES)}"
            )
        if self.cycle_policy not in CYCLE_POLICIES:
            raise ConfigError(
                f"Unknown cycle_policy '{self.cycle_policy}'; "
                f"expected one of {', '.join(CYCLE_POLICIES)}"
            )
        if not self.id_field or not self.parent_field:
            raise ConfigError("id_field and parent_field must be non-empty")

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> ForestSchema:
        """Parse schema from configuration dictionary.

        Args:
            config: Full configuration dictionary (from .forestry.toml).

        Returns:
            ForestSchema instance.
        """
        forest_config = config.get("forest", {})
        fields = forest_config.get("fields", {})
        return cls(
            id_field=str(fields.get("id", "id")),
            parent_field=str(fields.get("parent", "parent_id")),
            duplicate_policy=str(forest_config.get("duplicate_policy", "error")),
            cycle_policy=str(forest_config.get("cycle_policy", "error")),
        )

    @classmethod
    def default(cls) -> ForestSchema:
        """Return the default schema: strict on duplicates and cycles."""
        return cls()
