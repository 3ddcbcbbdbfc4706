"""
Action data model.

Each mapped controller is bound to exactly one of these actions.
"""

from dataclasses import dataclass
from typing import Any

PLACEHOLDER = "{}"


class ConfigError(ValueError):
    """Raised when configuration is missing or invalid."""


@dataclass(frozen=True)
class Key:
    """Tap a key on the virtual keyboard."""
    code: str  # e.g. KEY_F13


@dataclass(frozen=True)
class Command:
    """Run a shell command."""
    cmd: str


@dataclass(frozen=True)
class Linear:
    """Run a command with the control position as a percentage."""
    template: str  # must contain exactly one {} placeholder

    def render(self, percent: int) -> str:
        return self.template.replace(PLACEHOLDER, str(percent))


@dataclass(frozen=True)
class Relative:
    """Run one command when the control increases and another when it decreases."""
    inc_cmd: str
    dec_cmd: str


Action = Key | Command | Linear | Relative


def _require_str(data: dict[str, Any], field_name: str, action_type: str) -> str:
    value = data.get(field_name)
    if not isinstance(value, str):
        raise ConfigError(f"{action_type} action requires a string '{field_name}'")
    return value


def parse_action(data: Any) -> Action:
    """
    Parse an action from config data.

    Args:
        data: Mapping with a 'type' tag and the variant's fields.

    Returns:
        The parsed action.

    Raises:
        ConfigError: If the tag is unknown or a field is missing.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Action must be a table, got {data!r}")

    action_type = str(data.get("type", "")).lower()

    if action_type == "key":
        return Key(code=_require_str(data, "code", "Key"))

    elif action_type == "command":
        return Command(cmd=_require_str(data, "cmd", "Command"))

    elif action_type == "linear":
        template = _require_str(data, "template", "Linear")
        if template.count(PLACEHOLDER) != 1:
            raise ConfigError(
                f"Linear template must contain exactly one '{PLACEHOLDER}': {template!r}"
            )
        return Linear(template=template)

    elif action_type == "relative":
        return Relative(
            inc_cmd=_require_str(data, "inc_cmd", "Relative"),
            dec_cmd=_require_str(data, "dec_cmd", "Relative"),
        )

    raise ConfigError(f"Unknown action type: {data.get('type')!r}")
