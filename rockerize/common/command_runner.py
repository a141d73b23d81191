from __future__ import annotations

import logging
import shutil
import subprocess
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .issues import ErrorKind, Issue

LineSink = Callable[[str], None]


@dataclass(slots=True)
class CommandResult:
    """Represents the outcome of an external command execution."""

    command: Sequence[str]
    tool_available: bool
    stream_available: bool
    lines_forwarded: int
    duration: float
    exception: Optional[BaseException] = None

    def succeeded(self) -> bool:
        """Return True when the command was spawned and its output was streamed.

        The child's exit status is not part of this check.
        """
        return self.tool_available and self.stream_available

    def to_issue(self) -> Optional[Issue]:
        """Convert a failed result into an issue, or return None on success."""
        if not self.tool_available:
            return Issue(
                kind=ErrorKind.PROCESS_SPAWN_FAILED,
                message=str(self.exception) if self.exception else f"failed to spawn {self.command[0]}",
                subject=self.command[0],
            )
        if not self.stream_available:
            return Issue(
                kind=ErrorKind.PROCESS_STREAM_UNAVAILABLE,
                message="got no stdout from the child process",
                subject=self.command[0],
            )
        return None


def _print_line(line: str) -> None:
    print(line, flush=True)


class CommandRunner:
    """Thin wrapper over subprocess that streams a child's stdout to a sink."""

    def __init__(self, logger: Optional[logging.Logger] = None, sink: Optional[LineSink] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.sink = sink or _print_line

    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on PATH."""
        return shutil.which(name)

    def stream(self, command: Sequence[str], *, sink: Optional[LineSink] = None) -> CommandResult:
        """Execute a command, forwarding each stdout line to the sink as it arrives."""
        sink = sink or self.sink
        start = time.time()
        self.logger.debug("Executing command: %s", " ".join(command))
        try:
            process = subprocess.Popen(list(command), stdout=subprocess.PIPE)
        except (OSError, ValueError) as exc:
            duration = time.time() - start
            self.logger.debug("Command could not be spawned: %s (%s)", command[0], exc)
            return CommandResult(
                command=command,
                tool_available=False,
                stream_available=False,
                lines_forwarded=0,
                duration=duration,
                exception=exc,
            )

        if process.stdout is None:
            process.wait()
            return CommandResult(
                command=command,
                tool_available=True,
                stream_available=False,
                lines_forwarded=0,
                duration=time.time() - start,
            )

        forwarded = 0
        with process.stdout:
            for raw in process.stdout:
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    continue
                sink(line.rstrip("\r\n"))
                forwarded += 1

        return_code = process.wait()
        duration = time.time() - start
        # Exit status is informational only.
        self.logger.debug("Command %s exited with %s after %.2fs", command[0], return_code, duration)
        return CommandResult(
            command=command,
            tool_available=True,
            stream_available=True,
            lines_forwarded=forwarded,
            duration=duration,
        )
