"""
forestry.config.loader - Locate, parse and merge .forestry.toml files
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit.exceptions import ParseError

from forestry.config.defaults import DEFAULT_CONFIG
from forestry.core.errors import ConfigError

CONFIG_FILENAME = ".forestry.toml"


def find_config_file(start: Path) -> Optional[Path]:
    """
    Find .forestry.toml in start or any of its parent directories.

    Args:
        start: Directory (or file) to start searching from

    Returns:
        Path to the config file, or None if not found
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent

    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def parse_toml(content: str) -> Dict[str, Any]:
    """
    Parse TOML text into plain Python containers.

    Args:
        content: TOML document text

    Returns:
        Parsed configuration dictionary

    Raises:
        ConfigError: If the document is not valid TOML
    """
    try:
        document = tomlkit.parse(content)
    except ParseError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e
    return document.unwrap()


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override onto base. Neither input is modified.

    Args:
        base: Base configuration (e.g., defaults)
        override: Values taking precedence

    Returns:
        New merged dictionary
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path: Path) -> Dict[str, Any]:
    """
    Load a configuration file merged over DEFAULT_CONFIG.

    Args:
        path: Path to a .forestry.toml file

    Returns:
        Merged configuration dictionary

    Raises:
        FileNotFoundError: If path does not exist
        ConfigError: If the file is not valid TOML
    """
    content = Path(path).read_text(encoding="utf-8")
    return merge_configs(DEFAULT_CONFIG, parse_toml(content))
