"""
Effect sinks for key taps and shell commands.
"""

from .base import CommandSink, KeySink, SinkError
from .keyboard import PynputKeySink, UInputKeySink, create_key_sink
from .shell import ShellCommandSink

__all__ = [
    "CommandSink",
    "KeySink",
    "PynputKeySink",
    "ShellCommandSink",
    "SinkError",
    "UInputKeySink",
    "create_key_sink",
]
