"""
Mapping table from controller id to action.

Built once at startup and read-only afterwards.
"""

from types import MappingProxyType
from typing import Any, Mapping

from .base import Action, ConfigError, Key, parse_action

MappingTable = Mapping[int, Action]

MAX_CONTROLLER_ID = 127


def parse_controller_id(key: Any) -> int | None:
    """Parse a config key as a controller id (0-127), or None if it isn't one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        value = key
    else:
        try:
            value = int(str(key).strip())
        except ValueError:
            return None
    if 0 <= value <= MAX_CONTROLLER_ID:
        return value
    return None


def build_mapping_table(raw: Mapping[Any, Any]) -> MappingTable:
    """
    Build the mapping table from config data.

    Keys that are not valid controller ids are dropped.

    Args:
        raw: Mapping of controller id (usually a string) to action data.

    Returns:
        Read-only mapping of controller id to action.

    Raises:
        ConfigError: If an action is invalid.
    """
    table: dict[int, Action] = {}
    for key, data in raw.items():
        controller_id = parse_controller_id(key)
        if controller_id is None:
            continue
        try:
            table[controller_id] = parse_action(data)
        except ConfigError as e:
            raise ConfigError(f"Mapping {key!r}: {e}") from e
    return MappingProxyType(table)


def key_codes(table: MappingTable) -> set[str]:
    """Get the key codes used by Key actions."""
    return {action.code for action in table.values() if isinstance(action, Key)}
