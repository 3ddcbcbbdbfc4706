#!/usr/bin/env python3
"""
MIDI Actions - Entry point.

Turns a MIDI control surface into key presses and shell commands.
"""

from midi_actions.cli import main

if __name__ == "__main__":
    main()
