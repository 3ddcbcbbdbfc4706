"""
Action system for MIDI actions.

Provides the action variants and the controller mapping table.
"""

from .base import (
    PLACEHOLDER,
    Action,
    Command,
    ConfigError,
    Key,
    Linear,
    Relative,
    parse_action,
)
from .mapping import MappingTable, build_mapping_table, key_codes, parse_controller_id

__all__ = [
    "PLACEHOLDER",
    "Action",
    "Command",
    "ConfigError",
    "Key",
    "Linear",
    "MappingTable",
    "Relative",
    "build_mapping_table",
    "key_codes",
    "parse_action",
    "parse_controller_id",
]
