"""Read the application's binary name from the project descriptor."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional

from ..common.issues import ErrorKind, StageResult
from ..common.models import ProjectMetadata
from ..config import RockerizeConfig

logger = logging.getLogger(__name__)


def read_project_metadata(
    config: RockerizeConfig,
    cwd: Optional[Path] = None,
) -> StageResult[ProjectMetadata]:
    """
    Extract the binary name from the descriptor in the working directory.

    Expects a document like::

        [package]
        name = "some-application-name"

    Args:
        config: Settings naming the descriptor file, section, and key
        cwd: Directory holding the descriptor; defaults to the current directory

    Returns:
        StageResult carrying ProjectMetadata, or a METADATA_* issue
    """
    if cwd is None:
        try:
            cwd = Path.cwd()
        except OSError as exc:
            return StageResult.fail(ErrorKind.METADATA_IO, f"failed to get current directory: {exc}")

    filepath = cwd / config.descriptor_filename
    try:
        content = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return StageResult.fail(
            ErrorKind.METADATA_IO,
            f"failed to read '{filepath}': {exc}",
            subject=str(filepath),
        )

    try:
        document = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        return StageResult.fail(ErrorKind.METADATA_PARSE, str(exc), subject=str(filepath))

    section_name = config.descriptor_section
    key = config.descriptor_key

    section = document.get(section_name)
    if section is None:
        return StageResult.fail(
            ErrorKind.METADATA_SECTION_MISSING,
            f"no `{section_name}` in {filepath}",
            subject=section_name,
        )
    if not isinstance(section, dict):
        return StageResult.fail(
            ErrorKind.METADATA_SCHEMA,
            f"`{section_name}` is in wrong type",
            subject=section_name,
        )

    name = section.get(key)
    if name is None:
        return StageResult.fail(
            ErrorKind.METADATA_SCHEMA,
            f"no `{key}` in {filepath}",
            subject=f"{section_name}.{key}",
        )
    if not isinstance(name, str):
        return StageResult.fail(
            ErrorKind.METADATA_SCHEMA,
            f"`{key}` is in wrong type",
            subject=f"{section_name}.{key}",
        )
    if not name:
        return StageResult.fail(
            ErrorKind.METADATA_SCHEMA,
            f"`{key}` is empty in {filepath}",
            subject=f"{section_name}.{key}",
        )

    logger.debug("Read binary name %r from %s", name, filepath)
    return StageResult.ok(ProjectMetadata(binary_name=name, descriptor_path=filepath))
