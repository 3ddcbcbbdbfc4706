"""
Shell command sink.
"""

import subprocess

from .base import SinkError


class ShellCommandSink:
    """Starts shell commands in the background."""

    def __init__(self, shell: str = "/bin/sh"):
        self.shell = shell
        self.processes: list[subprocess.Popen] = []

    def reap(self) -> None:
        """Forget commands that have finished."""
        self.processes = [p for p in self.processes if p.poll() is None]

    def spawn_detached(self, cmd: str) -> None:
        """Start a command via the shell without waiting for it to finish."""
        self.reap()
        try:
            process = subprocess.Popen(
                [self.shell, "-c", cmd],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte
            raise SinkError(f"Failed to spawn command: {cmd!r}: {e}") from e
        self.processes.append(process)
