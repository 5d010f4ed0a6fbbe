"""
forestry.config - Configuration loading and defaults
"""

from forestry.config.loader import load_config, find_config_file, merge_configs
from forestry.config.defaults import DEFAULT_CONFIG

__all__ = [
    "load_config",
    "find_config_file",
    "merge_configs",
    "DEFAULT_CONFIG",
]
