"""
Effect sink interfaces.

The broker only depends on these, never on a concrete backend.
"""

from typing import Protocol


class SinkError(Exception):
    """Raised when a side effect could not be performed."""


class KeySink(Protocol):
    """Something that can tap a key."""

    def emit_key_tap(self, code: str) -> None:
        """Press and release a key. Raises SinkError on failure."""
        ...


class CommandSink(Protocol):
    """Something that can start a shell command."""

    def spawn_detached(self, cmd: str) -> None:
        """Start a command without waiting for it. Raises SinkError on failure."""
        ...
