"""
Command-line interface for MIDI actions.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from .actions import key_codes
from .broker import create_broker
from .config import ConfigError, load_config
from .devices import (
    DeviceConnectionError,
    DeviceNotFoundError,
    connect,
    find_device,
    list_midi_ports,
    listen,
)
from .setup_wizard import run_discovery
from .sinks import ShellCommandSink, SinkError, create_key_sink


def cmd_run(args: argparse.Namespace) -> int:
    """Run the MIDI actions daemon."""
    config_path = Path(args.config)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f"Error: {e}")
        print("Run 'midi-actions setup' to discover your device's controls.")
        return 1

    print(f"Loaded {len(config.mappings)} mappings from {config_path}")

    try:
        device = find_device(config.device_name)
    except DeviceNotFoundError as e:
        print(f"Error: {e}")
        print("Available ports:")
        for port in list_midi_ports():
            print(f"  - {port}")
        return 1

    try:
        key_sink = create_key_sink(key_codes(config.mappings))
    except SinkError as e:
        print(f"Error: {e}")
        return 1

    try:
        connect(device)
    except DeviceConnectionError as e:
        print(f"Error: {e}")
        return 1

    broker = create_broker(
        config.mappings,
        key_sink=key_sink,
        command_sink=ShellCommandSink(),
        device_name=config.device_name,
        verbose=getattr(args, "verbose", False),
    )

    print(f"Running on {device.port_name}")
    print()
    print("-" * 60)
    print("Press Ctrl+C to stop")
    print("-" * 60)
    print()

    try:
        closed_normally = asyncio.run(listen(device, broker.handle_frame))
    except KeyboardInterrupt:
        print("\n" + "-" * 60)
        print("Stopped.")
        return 0

    return 0 if closed_normally else 1


def cmd_setup(args: argparse.Namespace) -> int:
    """Run discovery mode."""
    return run_discovery(args.port)


def cmd_list_devices(args: argparse.Namespace) -> int:
    """List available MIDI devices."""
    ports = list_midi_ports()

    if not ports:
        print("No MIDI input ports found.")
        return 0

    print("Available MIDI input ports:")
    print()
    for i, port in enumerate(ports, 1):
        print(f"  [{i}] {port}")
    print()

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="midi-actions",
        description="Turn MIDI knobs and buttons into key presses and shell commands",
    )
    parser.add_argument(
        "-c", "--config",
        default="config.yaml",
        help="Path to config file (default: config.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # run command (default)
    run_parser = subparsers.add_parser("run", help="Run the daemon")
    run_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print every MIDI event and triggered action",
    )
    run_parser.set_defaults(func=cmd_run)

    # setup command
    setup_parser = subparsers.add_parser("setup", help="Print raw MIDI events to help write a config")
    setup_parser.add_argument(
        "-p", "--port",
        type=int,
        default=None,
        help="Port number from list-devices (default: last port)",
    )
    setup_parser.set_defaults(func=cmd_setup)

    # list-devices command
    list_dev_parser = subparsers.add_parser("list-devices", help="List MIDI devices")
    list_dev_parser.set_defaults(func=cmd_list_devices)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to 'run' if no command specified
    if args.command is None:
        args.func = cmd_run

    # Ensure unbuffered output
    sys.stdout.reconfigure(line_buffering=True)

    sys.exit(args.func(args))
