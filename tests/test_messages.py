"""
Tests for MIDI frame classification.
"""

import mido
import pytest

from midi_actions.messages import (
    ClassifiedEvent,
    EventKind,
    classify,
    classify_message,
    describe_frame,
)


class TestClassify:
    def test_note_on(self):
        assert classify([0x90, 36, 100]) == ClassifiedEvent(EventKind.NOTE_ON, 36, 100)

    def test_note_on_any_channel(self):
        assert classify([0x9F, 36, 1]) == ClassifiedEvent(EventKind.NOTE_ON, 36, 1)

    def test_note_on_zero_velocity_is_ignored(self):
        assert classify([0x90, 36, 0]) is None

    def test_control_change(self):
        assert classify([0xB3, 7, 64]) == ClassifiedEvent(EventKind.CONTROL_CHANGE, 7, 64)

    def test_control_change_zero_value_is_kept(self):
        assert classify([0xB0, 7, 0]) == ClassifiedEvent(EventKind.CONTROL_CHANGE, 7, 0)

    @pytest.mark.parametrize("frame", [[], [0x90], [0xB0, 7], [0x90, 36]])
    def test_short_frames_are_ignored(self, frame):
        assert classify(frame) is None

    @pytest.mark.parametrize("status", [0x80, 0xA0, 0xC0, 0xD0, 0xE0, 0xF0, 0xF8])
    def test_other_statuses_are_ignored(self, status):
        assert classify([status, 10, 20]) is None

    def test_extra_bytes_are_ignored(self):
        assert classify([0xB0, 7, 64, 1, 2]) == ClassifiedEvent(EventKind.CONTROL_CHANGE, 7, 64)


def test_classify_mido_message():
    msg = mido.Message("control_change", channel=2, control=20, value=127)
    assert classify_message(msg) == ClassifiedEvent(EventKind.CONTROL_CHANGE, 20, 127)


def test_classify_mido_sysex_is_ignored():
    msg = mido.Message("sysex", data=[1, 2, 3])
    assert classify_message(msg) is None


def test_event_str():
    assert str(ClassifiedEvent(EventKind.NOTE_ON, 36, 100)) == "NoteOn id=36 val=100"
    assert str(ClassifiedEvent(EventKind.CONTROL_CHANGE, 7, 0)) == "CC id=7 val=0"


def test_describe_frame():
    assert describe_frame([176, 7, 64]) == "RAW: [176, 7, 64] -> Type: 0xb0"
    assert describe_frame([]) == "RAW: []"
