"""Shared data models used across the parser, generator, and runtime."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class BuildRequest(BaseModel):
    """Structured build request parsed from command-line tokens."""

    model_config = ConfigDict(frozen=True)

    build_only: bool = Field(default=False, description="Build the image without running it")
    exposed_ports: Tuple[int, ...] = Field(default=(), description="Ports to expose, in command-line order")
    add_files: Tuple[str, ...] = Field(default=(), description="Local files to copy into the image root")
    verbose: bool = Field(default=False, description="Echo arguments and the generated build definition")


class ProjectMetadata(BaseModel):
    """Information extracted from the project descriptor."""

    model_config = ConfigDict(frozen=True)

    binary_name: str = Field(min_length=1, description="Canonical binary name of the application")
    descriptor_path: Path = Field(description="Path of the descriptor the name was read from")


@dataclass(frozen=True)
class BuildDefinition:
    """Generated build definition and the file it is written to."""

    content: str
    path: Path
