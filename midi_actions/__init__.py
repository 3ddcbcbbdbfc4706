"""
MIDI actions daemon.

Listens to a MIDI control surface and turns its messages into key
presses, shell commands, and knob-driven volume control.
"""

__version__ = "0.1.0"
