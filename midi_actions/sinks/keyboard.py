"""
Key tap sinks.

On Linux keys are injected through a uinput virtual keyboard (evdev).
On macOS and Windows they go through pynput.
Key codes use the Linux names everywhere, e.g. KEY_F13 or KEY_A.
"""

import sys
from typing import Any, Iterable, Mapping

from .base import KeySink, SinkError

DEVICE_NAME = "midi-actions"
EV_KEY = 0x01  # linux/input-event-codes.h


class UInputKeySink:
    """Taps keys on a uinput virtual keyboard."""

    def __init__(
        self,
        codes: Iterable[str],
        device: Any = None,
        code_table: Mapping[str, int] | None = None,
    ):
        """
        Args:
            codes: Key codes the virtual keyboard should support.
            device: Existing uinput device (created if not given).
            code_table: Key name to evdev code lookup (evdev's if not given).
        """
        if code_table is None:
            from evdev import ecodes
            code_table = ecodes.ecodes
        self.code_table = code_table

        # Only known codes can be registered on the device
        self.keys: dict[str, int] = {}
        for name in codes:
            code = self.code_table.get(name)
            if code is not None and name.startswith(("KEY_", "BTN_")):
                self.keys[name] = code

        if device is None and self.keys:
            device = self._create_device(sorted(self.keys.values()))
        self.device = device

    @staticmethod
    def _create_device(key_codes: list[int]) -> Any:
        from evdev import UInput

        try:
            return UInput({EV_KEY: key_codes}, name=DEVICE_NAME)
        except Exception as e:
            raise SinkError(f"Cannot create virtual keyboard: {e}") from e

    def emit_key_tap(self, code: str) -> None:
        """Press and release a key."""
        key = self.keys.get(code)
        if key is None or self.device is None:
            raise SinkError(f"Unknown key code: {code}")

        try:
            self.device.write(EV_KEY, key, 1)
            self.device.write(EV_KEY, key, 0)
            self.device.syn()
        except OSError as e:
            raise SinkError(f"Failed to emit key {code}: {e}") from e

    def close(self) -> None:
        if self.device is not None:
            self.device.close()


def pynput_key_name(code: str) -> str:
    """Convert a Linux key code to a pynput key name (KEY_F13 -> f13)."""
    name = code[4:] if code.upper().startswith("KEY_") else code
    return name.lower()


class PynputKeySink:
    """Taps keys through pynput."""

    def __init__(self, controller: Any = None, keys: Any = None):
        if controller is None or keys is None:
            from pynput.keyboard import Controller, Key
            controller = controller if controller is not None else Controller()
            keys = keys if keys is not None else Key
        self.controller = controller
        self.keys = keys

    def resolve(self, code: str) -> Any:
        """Resolve a key code to something pynput can press."""
        name = pynput_key_name(code)
        special = getattr(self.keys, name, None)
        if special is not None:
            return special
        if len(name) == 1:
            return name
        raise SinkError(f"Unknown key code: {code}")

    def emit_key_tap(self, code: str) -> None:
        """Press and release a key."""
        key = self.resolve(code)
        try:
            self.controller.press(key)
            self.controller.release(key)
        except Exception as e:
            raise SinkError(f"Failed to simulate key {code}: {e}") from e


def create_key_sink(codes: Iterable[str], platform: str = sys.platform) -> KeySink:
    """
    Create the key sink for the current platform.

    Args:
        codes: Key codes used by the configuration.
        platform: Platform name (defaults to sys.platform).

    Returns:
        A key sink.
    """
    if platform.startswith("linux"):
        return UInputKeySink(codes)
    return PynputKeySink()
