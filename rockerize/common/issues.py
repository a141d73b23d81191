"""Shared issue representation for build and run stages."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of failures a pipeline stage can report."""
    ENGINE_UNAVAILABLE = "engine_unavailable"
    METADATA_IO = "metadata_io"
    METADATA_PARSE = "metadata_parse"
    METADATA_SECTION_MISSING = "metadata_section_missing"
    METADATA_SCHEMA = "metadata_schema"
    DEFINITION_WRITE_FAILED = "definition_write_failed"
    PROCESS_SPAWN_FAILED = "process_spawn_failed"
    PROCESS_STREAM_UNAVAILABLE = "process_stream_unavailable"
    IMAGE_BUILD_FAILED = "image_build_failed"
    IMAGE_RUN_FAILED = "image_run_failed"


@dataclass(slots=True)
class Issue:
    """A terminal failure produced by a single stage."""

    kind: ErrorKind
    message: str
    subject: Optional[str] = None
    cause: Optional["Issue"] = None

    def wrap(self, kind: ErrorKind, prefix: str) -> "Issue":
        """Return a new issue of ``kind`` whose message is prefixed and which keeps this one as cause."""
        return Issue(kind=kind, message=f"{prefix}: {self.message}", subject=self.subject, cause=self)

    def root_kind(self) -> ErrorKind:
        """Return the kind of the innermost cause."""
        issue = self
        while issue.cause is not None:
            issue = issue.cause
        return issue.kind

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class StageResult(Generic[T]):
    """Value-or-issue outcome of a pipeline stage."""

    value: Optional[T] = None
    issue: Optional[Issue] = None

    @property
    def success(self) -> bool:
        return self.issue is None

    @classmethod
    def ok(cls, value: T) -> "StageResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, subject: Optional[str] = None) -> "StageResult[T]":
        return cls(issue=Issue(kind=kind, message=message, subject=subject))

    @classmethod
    def from_issue(cls, issue: Issue) -> "StageResult[T]":
        return cls(issue=issue)
