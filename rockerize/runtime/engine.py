"""Container engine build and run helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..common.command_runner import CommandRunner
from ..common.issues import ErrorKind, StageResult
from ..config import RockerizeConfig


class ContainerEngine:
    """Build and run images through the engine's command-line interface."""

    def __init__(
        self,
        command_runner: CommandRunner,
        config: Optional[RockerizeConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.command_runner = command_runner
        self.config = config or RockerizeConfig()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def binary(self) -> str:
        return self.config.engine_bin

    def check_available(self) -> StageResult[str]:
        """Probe that the engine binary resolves on PATH."""
        resolved = self.command_runner.which(self.binary)
        if resolved is None:
            return StageResult.fail(
                ErrorKind.ENGINE_UNAVAILABLE,
                f"`{self.binary}` is not installed, not in $PATH, or not executable by this application.",
                subject=self.binary,
            )
        self.logger.debug("Using container engine at %s", resolved)
        return StageResult.ok(resolved)

    def build_command(self, image_name: str, definition_file: Path | str) -> List[str]:
        return [
            self.binary,
            "build",
            "--rm",
            "--force-rm",
            "--tag",
            image_name,
            "--file",
            str(definition_file),
            ".",
        ]

    def run_command(self, image_name: str) -> List[str]:
        return [self.binary, "run", "-it", image_name]

    def build(self, image_name: str, definition_file: Path | str) -> StageResult[str]:
        """
        Build an image from the definition file with the working directory as context.

        Args:
            image_name: Tag for the built image
            definition_file: Build definition, relative to the working directory

        Returns:
            StageResult carrying the image name, or an IMAGE_BUILD_FAILED issue
        """
        self.logger.info("Building image %s", image_name)
        result = self.command_runner.stream(self.build_command(image_name, definition_file))
        issue = result.to_issue()
        if issue is not None:
            return StageResult.from_issue(issue.wrap(ErrorKind.IMAGE_BUILD_FAILED, "failed to build docker image"))
        return StageResult.ok(image_name)

    def run(self, image_name: str) -> StageResult[None]:
        """Run an image interactively with a TTY."""
        available = self.check_available()
        if not available.success:
            return StageResult.from_issue(available.issue)

        self.logger.info("Running image %s", image_name)
        result = self.command_runner.stream(self.run_command(image_name))
        issue = result.to_issue()
        if issue is not None:
            return StageResult.from_issue(issue.wrap(ErrorKind.IMAGE_RUN_FAILED, "failed to run docker image"))
        return StageResult.ok(None)
