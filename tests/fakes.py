"""Test doubles for the command runner."""

from __future__ import annotations

from typing import List, Optional, Sequence

from rockerize.common.command_runner import CommandResult, CommandRunner


class FakeCommandRunner(CommandRunner):
    """Record commands instead of spawning them."""

    def __init__(
        self,
        *,
        engine_path: Optional[str] = "/usr/bin/docker",
        fail_on: Sequence[str] = (),
    ) -> None:
        super().__init__(sink=lambda line: None)
        self.engine_path = engine_path
        self.fail_on = set(fail_on)
        self.commands: List[List[str]] = []

    def which(self, name: str) -> Optional[str]:
        return self.engine_path

    def stream(self, command, *, sink=None) -> CommandResult:
        self.commands.append(list(command))
        spawned = command[1] not in self.fail_on
        return CommandResult(
            command=command,
            tool_available=spawned,
            stream_available=spawned,
            lines_forwarded=0,
            duration=0.0,
            exception=None if spawned else FileNotFoundError(2, "No such file or directory"),
        )
