"""
Configuration loading and validation.

Handles YAML config parsing with environment variable expansion.
TOML files are accepted too.
"""

import os
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .actions import ConfigError, MappingTable, build_mapping_table

__all__ = ["Config", "ConfigError", "expand_env_vars", "expand_env_vars_recursive", "load_config"]


@dataclass(frozen=True)
class Config:
    """Root configuration object."""
    device_name: str  # Substring of the MIDI port name
    mappings: MappingTable


def expand_env_vars(value: str) -> str:
    """Expand environment variables in a string.

    Supports ${VAR} syntax.
    """
    pattern = re.compile(r'\$\{([^}]+)\}')

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return pattern.sub(replacer, value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Recursively expand environment variables in a data structure."""
    if isinstance(obj, str):
        return expand_env_vars(obj)
    elif isinstance(obj, dict):
        return {k: expand_env_vars_recursive(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars_recursive(item) for item in obj]
    return obj


def _read_document(path: Path) -> Any:
    try:
        if path.suffix.lower() == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        with open(path) as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def parse_config(raw: Any) -> Config:
    """Parse a config document that has already been loaded."""
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a table with 'device_name' and 'mappings'")

    raw = expand_env_vars_recursive(raw)

    device_name = raw.get("device_name")
    if not isinstance(device_name, str) or not device_name:
        raise ConfigError("Config requires a non-empty 'device_name'")

    mappings = raw.get("mappings", {})
    if mappings is None:
        mappings = {}
    if not isinstance(mappings, dict):
        raise ConfigError("'mappings' must be a table of controller id to action")

    return Config(device_name=device_name, mappings=build_mapping_table(mappings))


def load_config(path: Path) -> Config:
    """Load configuration from a YAML (or TOML) file."""
    return parse_config(_read_document(Path(path)))
