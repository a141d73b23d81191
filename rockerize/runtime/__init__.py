"""Runtime helpers for building and running rockerized images."""

from .engine import ContainerEngine
from .orchestrator import BuildOrchestrator, PipelineOutcome, PipelineState

__all__ = [
    "ContainerEngine",
    "BuildOrchestrator",
    "PipelineOutcome",
    "PipelineState",
]
