"""Sequence the build and run stages for a single invocation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..common.command_runner import CommandRunner
from ..common.issues import ErrorKind, Issue, StageResult
from ..common.models import BuildDefinition, BuildRequest, ProjectMetadata
from ..config import RockerizeConfig
from ..generator import render_build_definition
from ..metadata import read_project_metadata
from .engine import ContainerEngine


class PipelineState(Enum):
    """Terminal states of one invocation."""
    HELP_PRINTED = "help_printed"
    BUILT = "built"
    RAN = "ran"
    RUN_FAILED = "run_failed"
    ABORTED = "aborted"


@dataclass(slots=True)
class PipelineOutcome:
    """Aggregate result of building and optionally running an image."""

    state: PipelineState
    image_name: Optional[str] = None
    issue: Optional[Issue] = None
    definition: Optional[BuildDefinition] = None

    @property
    def success(self) -> bool:
        return self.state is not PipelineState.ABORTED


class BuildOrchestrator:
    """
    Build an image for the application in the working directory, then run it.

    Stages run in order and the first failing stage aborts the pipeline:
    engine check, metadata read, definition generation, definition write,
    image build. The run stage only happens when the request is not build-only,
    and its failure is reported without aborting.
    """

    def __init__(
        self,
        config: Optional[RockerizeConfig] = None,
        command_runner: Optional[CommandRunner] = None,
        engine: Optional[ContainerEngine] = None,
        logger: Optional[logging.Logger] = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.config = config or RockerizeConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.command_runner = command_runner or CommandRunner(logger=self.logger)
        self.engine = engine or ContainerEngine(self.command_runner, config=self.config, logger=self.logger)
        self.echo = echo

    def execute(self, request: BuildRequest) -> PipelineOutcome:
        """Build the image and, unless ``build_only`` is set, run it."""
        built = self.build(request)
        if built.issue is not None:
            return PipelineOutcome(state=PipelineState.ABORTED, issue=built.issue)

        image_name, definition = built.value
        if request.build_only:
            return PipelineOutcome(state=PipelineState.BUILT, image_name=image_name, definition=definition)

        ran = self.engine.run(image_name)
        if ran.issue is not None:
            self.logger.debug("Run stage failed for %s: %s", image_name, ran.issue.message)
            return PipelineOutcome(
                state=PipelineState.RUN_FAILED,
                image_name=image_name,
                issue=ran.issue,
                definition=definition,
            )
        return PipelineOutcome(state=PipelineState.RAN, image_name=image_name, definition=definition)

    def build(self, request: BuildRequest) -> StageResult[tuple[str, BuildDefinition]]:
        """Run every stage up to and including the image build."""
        available = self.engine.check_available()
        if available.issue is not None:
            return StageResult.from_issue(available.issue)

        metadata = read_project_metadata(self.config)
        if metadata.issue is not None:
            return StageResult.from_issue(metadata.issue)

        written = self.write_definition(self.generate_definition(metadata.value, request), request.verbose)
        if written.issue is not None:
            return StageResult.from_issue(written.issue)

        image_name = self.config.image_name(metadata.value.binary_name)
        built = self.engine.build(image_name, self.config.definition_filename)
        if built.issue is not None:
            return StageResult.from_issue(built.issue)

        return StageResult.ok((image_name, written.value))

    def generate_definition(self, metadata: ProjectMetadata, request: BuildRequest) -> BuildDefinition:
        content = render_build_definition(
            metadata.binary_name,
            request.exposed_ports,
            request.add_files,
            config=self.config,
        )
        return BuildDefinition(content=content, path=metadata.descriptor_path.parent / self.config.definition_filename)

    def write_definition(self, definition: BuildDefinition, verbose: bool = False) -> StageResult[BuildDefinition]:
        """Write the definition to disk, overwriting any previous one."""
        if verbose:
            self.echo(f"* generated dockerfile ({definition.path}):\n{definition.content}")
        try:
            with open(definition.path, "w", encoding="utf-8") as handle:
                handle.write(definition.content)
        except OSError as exc:
            return StageResult.fail(
                ErrorKind.DEFINITION_WRITE_FAILED,
                f"failed to write to dockerfile: {exc}",
                subject=str(definition.path),
            )
        self.logger.debug("Wrote build definition to %s", definition.path)
        return StageResult.ok(definition)
