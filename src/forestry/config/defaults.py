"""
forestry.config.defaults - Default configuration values
"""

DEFAULT_CONFIG = {
    "forest": {
        "fields": {
            "id": "id",
            "parent": "parent_id",
        },
        "duplicate_policy": "error",
        "cycle_policy": "error",
    },
}
