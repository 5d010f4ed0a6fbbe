"""Tests for core/forest_schema.py - Resolution options."""

import pytest

from forestry.core.errors import ConfigError
from forestry.core.forest_schema import ForestSchema


class TestForestSchema:
    """Tests for ForestSchema."""

    def test_default(self):
        schema = ForestSchema.default()
        assert schema.id_field == "id"
        assert schema.parent_field == "parent_id"
        assert schema.duplicate_policy == "error"
        assert schema.cycle_policy == "error"

    def test_from_empty_config(self):
        assert ForestSchema.from_config({}) == ForestSchema.default()

    def test_from_config(self):
        config = {
            "forest": {
                "fields": {"id": "key", "parent": "parent_key"},
                "duplicate_policy": "last_wins",
                "cycle_policy": "unlinked",
            }
        }
        schema = ForestSchema.from_config(config)

        assert schema.id_field == "key"
        assert schema.parent_field == "parent_key"
        assert schema.duplicate_policy == "last_wins"
        assert schema.cycle_policy == "unlinked"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"duplicate_policy": "first_wins"},
            {"cycle_policy": "ignore"},
            {"id_field": ""},
        ],
    )
    def test_rejects_invalid_options(self, kwargs):
        with pytest.raises(ConfigError):
            ForestSchema(**kwargs)

    def test_is_frozen(self):
        schema = ForestSchema()
        with pytest.raises(AttributeError):
            schema.cycle_policy = "unlinked"
