"""
MIDI device management with asyncio.

Handles discovery, connection, and raw frame streaming from a MIDI device.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Sequence

import mido


class DeviceNotFoundError(LookupError):
    """Raised when no MIDI port matches the configured device."""


class DeviceConnectionError(OSError):
    """Raised when a MIDI port cannot be opened."""


@dataclass
class MidiDevice:
    """Represents a connected MIDI device."""
    name: str  # Configured device name
    port_name: str  # Actual MIDI port name
    port: mido.ports.BaseInput | None = None

    def __str__(self) -> str:
        return f"{self.name} ({self.port_name})"


def list_midi_ports() -> list[str]:
    """List all available MIDI input ports."""
    return mido.get_input_names()


def find_port(device_name: str, ports: Sequence[str] | None = None) -> str:
    """
    Find the MIDI port for a device.

    Args:
        device_name: Substring of the port name to look for.
        ports: Port names to search (defaults to all input ports).

    Returns:
        The first matching port name.

    Raises:
        DeviceNotFoundError: If no port matches.
    """
    if ports is None:
        ports = list_midi_ports()

    for port_name in ports:
        if device_name in port_name:
            return port_name

    raise DeviceNotFoundError(f"Device '{device_name}' not found")


def find_device(device_name: str, ports: Sequence[str] | None = None) -> MidiDevice:
    """Find the MIDI device matching a configured name."""
    return MidiDevice(name=device_name, port_name=find_port(device_name, ports))


def connect(device: MidiDevice) -> MidiDevice:
    """
    Open a device's MIDI input port.

    Raises:
        DeviceConnectionError: If the port cannot be opened.
    """
    try:
        device.port = mido.open_input(device.port_name)
    except Exception as e:
        raise DeviceConnectionError(f"Cannot open {device}: {e}") from e
    return device


async def listen(
    device: MidiDevice,
    on_frame: Callable[[list[int]], object],
) -> bool:
    """
    Read raw MIDI frames from a device.

    Uses asyncio.to_thread() to wrap mido's blocking reads. Frames are
    delivered one at a time, in arrival order. The port is opened first
    if connect() has not been called.

    Args:
        device: The MIDI device to read from.
        on_frame: Function to call with the raw bytes of each message.

    Returns:
        True if the port closed normally, False if the device disconnected.
    """
    def blocking_read():
        """Blocking read that runs in a thread."""
        if device.port is None:
            connect(device)
        with device.port as port:
            for raw_msg in port:
                on_frame(raw_msg.bytes())

    try:
        await asyncio.to_thread(blocking_read)
    except Exception as e:
        print(f"Device {device} disconnected: {e}")
        return False
    finally:
        device.port = None

    return True
