"""
Shared fixtures for MIDI actions tests.
"""

import pytest

from midi_actions.sinks import SinkError


class RecordingKeySink:
    """Key sink that records taps instead of injecting them."""

    def __init__(self, fail: bool = False):
        self.taps: list[str] = []
        self.fail = fail

    def emit_key_tap(self, code: str) -> None:
        if self.fail:
            raise SinkError(f"Unknown key code: {code}")
        self.taps.append(code)


class RecordingCommandSink:
    """Command sink that records commands instead of spawning them."""

    def __init__(self, fail: bool = False):
        self.commands: list[str] = []
        self.fail = fail

    def spawn_detached(self, cmd: str) -> None:
        if self.fail:
            raise SinkError(f"Failed to spawn command: {cmd}")
        self.commands.append(cmd)


@pytest.fixture
def key_sink():
    return RecordingKeySink()


@pytest.fixture
def command_sink():
    return RecordingCommandSink()


def cc(controller_id: int, value: int, channel: int = 0) -> list[int]:
    """Raw Control Change frame."""
    return [0xB0 | channel, controller_id, value]


def note_on(note: int, velocity: int, channel: int = 0) -> list[int]:
    """Raw Note On frame."""
    return [0x90 | channel, note, velocity]
