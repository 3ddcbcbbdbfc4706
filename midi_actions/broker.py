"""
Message broker for dispatching MIDI events to actions.
"""

from dataclasses import dataclass, field
from typing import Sequence

from .actions import Command, Key, Linear, MappingTable, Relative
from .messages import ClassifiedEvent, classify
from .sinks import CommandSink, KeySink, SinkError
from .state import ControllerStateStore, Direction


@dataclass(frozen=True)
class KeyTap:
    """Request to tap a key."""
    code: str

    def __str__(self) -> str:
        return f"Key: {self.code}"


@dataclass(frozen=True)
class RunCommand:
    """Request to start a shell command."""
    cmd: str

    def __str__(self) -> str:
        return f"Executed: {self.cmd}"


SideEffect = KeyTap | RunCommand


def to_percent(value: int) -> int:
    """Convert a 0-127 MIDI value to a 0-100 percentage."""
    return round(value * 100 / 127)


def dispatch(
    event: ClassifiedEvent,
    mappings: MappingTable,
    state: ControllerStateStore,
) -> SideEffect | None:
    """
    Decide what an event should do.

    Updates controller state for stateful actions but performs no
    side effects itself.

    Args:
        event: The classified MIDI event.
        mappings: Controller id to action table.
        state: Per-controller state, updated in place.

    Returns:
        The side effect to perform, or None.
    """
    action = mappings.get(event.id)
    if action is None:
        return None

    if isinstance(action, Key):
        return KeyTap(action.code)

    elif isinstance(action, Command):
        return RunCommand(action.cmd)

    elif isinstance(action, Linear):
        percent = to_percent(event.value)
        # Repeated percentages are debounced
        if state.update_percent(event.id, percent):
            return RunCommand(action.render(percent))
        return None

    elif isinstance(action, Relative):
        previous = state.swap_raw_value(event.id, event.value)
        if event.value > previous:
            state.record_direction(event.id, Direction.UP)
            return RunCommand(action.inc_cmd)
        if event.value < previous:
            state.record_direction(event.id, Direction.DOWN)
            return RunCommand(action.dec_cmd)
        return None

    return None


@dataclass
class MessageBroker:
    """
    Routes MIDI frames from a device to effect sinks.

    Handles:
    - Classification of raw frames
    - Action lookup and controller state
    - Reporting of failed side effects
    """
    mappings: MappingTable
    key_sink: KeySink
    command_sink: CommandSink
    state: ControllerStateStore = field(default_factory=ControllerStateStore)
    device_name: str = "midi"
    verbose: bool = False

    def handle_frame(self, frame: Sequence[int]) -> SideEffect | None:
        """Classify a raw frame and handle it. Ignored frames do nothing."""
        event = classify(frame)
        if event is None:
            return None
        return self.handle(event)

    def handle(self, event: ClassifiedEvent) -> SideEffect | None:
        """
        Dispatch an event and perform its side effect.

        Args:
            event: The classified MIDI event.

        Returns:
            The side effect that was attempted, or None.
        """
        if self.verbose:
            print(f"[{self.device_name}] {event}")

        effect = dispatch(event, self.mappings, self.state)
        if effect is None:
            return None

        try:
            self._perform(effect)
        except (SinkError, OSError) as e:
            print(f"  -> Error: {e}")
            return effect

        if self.verbose:
            print(f"  -> {effect}")
        return effect

    def _perform(self, effect: SideEffect) -> None:
        if isinstance(effect, KeyTap):
            self.key_sink.emit_key_tap(effect.code)
        else:
            self.command_sink.spawn_detached(effect.cmd)


def create_broker(
    mappings: MappingTable,
    key_sink: KeySink,
    command_sink: CommandSink,
    device_name: str = "midi",
    verbose: bool = False,
) -> MessageBroker:
    """
    Create a message broker with the given configuration.

    Args:
        mappings: Controller id to action table.
        key_sink: Sink for key taps.
        command_sink: Sink for shell commands.
        device_name: Name shown in verbose output.
        verbose: Print every event and side effect.

    Returns:
        Configured MessageBroker with empty controller state.
    """
    return MessageBroker(
        mappings=mappings,
        key_sink=key_sink,
        command_sink=command_sink,
        state=ControllerStateStore(),
        device_name=device_name,
        verbose=verbose,
    )
