"""
Discovery mode for writing a configuration.

Prints every raw MIDI frame from a device together with a suggested
mapping for knobs and buttons. Nothing is dispatched.
"""

from typing import Sequence

import mido
import yaml

from .devices import list_midi_ports
from .messages import EventKind, classify, describe_frame

DEFAULT_LINEAR_TEMPLATE = "pactl set-sink-volume @DEFAULT_SINK@ {}%"
DEFAULT_KEY_CODE = "KEY_F13"


def suggest_mapping(frame: Sequence[int]) -> str | None:
    """
    Suggest a config snippet for a frame.

    Control Changes are suggested as a Linear (volume) mapping,
    Note Ons as a Key mapping.

    Returns:
        YAML snippet with a heading comment, or None for other frames.
    """
    event = classify(frame)
    if event is None:
        return None

    if event.kind is EventKind.CONTROL_CHANGE:
        heading = f"# Knob detected (ID: {event.id})"
        action = {"type": "Linear", "template": DEFAULT_LINEAR_TEMPLATE}
    else:
        heading = f"# Button detected (ID: {event.id})"
        action = {"type": "Key", "code": DEFAULT_KEY_CODE}

    snippet = yaml.safe_dump(
        {str(event.id): action},
        default_flow_style=False,
        sort_keys=False,
    )
    return f"{heading}\n{snippet}"


def print_frame(frame: Sequence[int]) -> None:
    """Print a frame and its suggestion, if any."""
    print(describe_frame(frame))
    suggestion = suggest_mapping(frame)
    if suggestion:
        print(suggestion)


def run_discovery(port_index: int | None = None) -> int:
    """
    Run discovery mode.

    Args:
        port_index: 1-based index into the port list (defaults to the last port).

    Returns:
        Exit code (0 for success).
    """
    ports = list_midi_ports()
    if not ports:
        print("No MIDI input ports found!")
        print("Connect a MIDI device and try again.")
        return 1

    if port_index is None:
        port_name = ports[-1]
    elif 1 <= port_index <= len(ports):
        port_name = ports[port_index - 1]
    else:
        print(f"Invalid port index: {port_index}")
        return 1

    print("=" * 60)
    print("DISCOVERY MODE")
    print("=" * 60)
    print(f"Listening to '{port_name}'...")
    print("Press buttons, turn knobs, move faders. Press Ctrl+C to stop.")
    print()

    try:
        with mido.open_input(port_name) as port:
            for msg in port:
                print_frame(msg.bytes())
    except KeyboardInterrupt:
        print("\nDiscovery stopped.")

    return 0
