"""
Controller state management.

Tracks the last values seen per controller so knobs can be debounced
and their direction of movement detected.
"""

import threading
from dataclasses import dataclass, field, replace
from enum import Enum


class Direction(Enum):
    """Direction a control last moved in."""
    UP = "up"
    DOWN = "down"


@dataclass
class ControllerState:
    """State for a single controller."""
    last_raw_value: int | None = None  # Relative actions
    last_emitted_percent: int | None = None  # Linear actions
    last_direction: Direction | None = None


@dataclass
class ControllerStateStore:
    """
    Per-controller state keyed by controller id.

    Entries are created on first use and live as long as the store.
    Every read-modify-write happens under a single lock, so the
    comparisons stay correct if events arrive from more than one thread.
    """
    states: dict[int, ControllerState] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def _entry(self, controller_id: int) -> ControllerState:
        if controller_id not in self.states:
            self.states[controller_id] = ControllerState()
        return self.states[controller_id]

    def get(self, controller_id: int) -> ControllerState | None:
        """Get a snapshot of a controller's state, or None if it has none."""
        with self._lock:
            state = self.states.get(controller_id)
            return replace(state) if state is not None else None

    def update_percent(self, controller_id: int, percent: int) -> bool:
        """
        Record an emitted percentage if it changed.

        Args:
            controller_id: Controller to update.
            percent: Newly computed percentage.

        Returns:
            True if the percentage differs from the last emitted one
            (and was stored), False if it is a repeat.
        """
        with self._lock:
            state = self._entry(controller_id)
            if state.last_emitted_percent == percent:
                return False
            state.last_emitted_percent = percent
            return True

    def swap_raw_value(self, controller_id: int, value: int) -> int:
        """
        Store a raw value and return the one it replaces.

        The first value seen for a controller is returned as its own
        previous value, so it never reads as a movement.
        """
        with self._lock:
            state = self._entry(controller_id)
            previous = state.last_raw_value if state.last_raw_value is not None else value
            state.last_raw_value = value
            return previous

    def record_direction(self, controller_id: int, direction: Direction) -> None:
        """Remember the direction a controller last moved in."""
        with self._lock:
            self._entry(controller_id).last_direction = direction

    def reset(self, controller_id: int | None = None) -> None:
        """Forget one controller's state, or all of it."""
        with self._lock:
            if controller_id is None:
                self.states.clear()
            else:
                self.states.pop(controller_id, None)

    def __contains__(self, controller_id: object) -> bool:
        with self._lock:
            return controller_id in self.states

    def __len__(self) -> int:
        with self._lock:
            return len(self.states)
