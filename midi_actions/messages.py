"""
MIDI message classification.

Turns raw MIDI frames into typed events for the dispatch engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

NOTE_ON = 0x90
CONTROL_CHANGE = 0xB0


class EventKind(Enum):
    """Kinds of MIDI messages that can trigger actions."""
    NOTE_ON = "note_on"
    CONTROL_CHANGE = "control_change"


@dataclass(frozen=True)
class ClassifiedEvent:
    """A Note On or Control Change from a single controller."""
    kind: EventKind
    id: int
    value: int

    def __str__(self) -> str:
        if self.kind is EventKind.NOTE_ON:
            return f"NoteOn id={self.id} val={self.value}"
        return f"CC id={self.id} val={self.value}"


def classify(frame: Sequence[int]) -> ClassifiedEvent | None:
    """
    Classify a raw MIDI frame.

    Only Note On (with a non-zero velocity) and Control Change messages
    produce an event. The channel nibble is ignored.

    Args:
        frame: Raw message bytes, status byte first.

    Returns:
        The classified event, or None if the frame should be ignored.
    """
    if len(frame) < 3:
        return None

    status = frame[0] & 0xF0
    data1, data2 = frame[1], frame[2]

    if status == NOTE_ON:
        # Note On with velocity 0 is a Note Off
        if data2 == 0:
            return None
        return ClassifiedEvent(kind=EventKind.NOTE_ON, id=data1, value=data2)

    if status == CONTROL_CHANGE:
        return ClassifiedEvent(kind=EventKind.CONTROL_CHANGE, id=data1, value=data2)

    return None


def classify_message(msg) -> ClassifiedEvent | None:
    """Classify a mido message."""
    return classify(msg.bytes())


def describe_frame(frame: Sequence[int]) -> str:
    """Render a raw frame for discovery output."""
    raw = ", ".join(str(b) for b in frame)
    if not frame:
        return "RAW: []"
    return f"RAW: [{raw}] -> Type: {frame[0] & 0xF0:#x}"
