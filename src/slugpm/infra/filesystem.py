"""Filesystem-backed implementations of :class:`~slugpm.core.protocols.FileOps`.

This module is the **only** place in the codebase that touches the real
filesystem.  Every ``OSError`` is caught here and re-raised as
:class:`~slugpm.exceptions.FileOperationError` (or
:class:`~slugpm.exceptions.InvalidTargetError` for target resolution)
with the native error chained as ``__cause__``.
"""

from __future__ import annotations

import io
import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO

from slugpm.core.models import TargetKind
from slugpm.exceptions import FileOperationError, InvalidTargetError

logger = logging.getLogger(__name__)


class LocalFileOps:
    """Concrete :class:`FileOps` performing real filesystem calls.

    This class satisfies the :class:`~slugpm.core.protocols.FileOps`
    protocol structurally — no explicit inheritance required.
    """

    def create_dir_all(self, path: Path) -> None:
        logger.debug("mkdir -p %s", path)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileOperationError(
                f"creating {path}: {exc.strerror or exc}",
            ) from exc

    def rename(self, source: Path, destination: Path) -> None:
        logger.debug("rename %s -> %s", source, destination)
        if os.path.lexists(destination):
            raise FileOperationError(
                f"moving {source} -> {destination}: destination already exists",
                hint="Remove or rename the existing archived copy first.",
            )
        try:
            os.rename(source, destination)
        except OSError as exc:
            raise FileOperationError(
                f"moving {source} -> {destination}: {exc.strerror or exc}",
            ) from exc

    def open_append(self, path: Path) -> BinaryIO:
        logger.debug("open for append %s", path)
        try:
            return open(path, "ab")
        except OSError as exc:
            raise FileOperationError(
                f"opening {path}: {exc.strerror or exc}",
            ) from exc


class NullFileOps:
    """No-op :class:`FileOps` that accepts every call and discards writes.

    Each call is recorded in :attr:`calls` as ``(operation, *paths)`` so
    orchestration order can be asserted without a filesystem.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def create_dir_all(self, path: Path) -> None:
        self.calls.append(("create_dir_all", str(path)))

    def rename(self, source: Path, destination: Path) -> None:
        self.calls.append(("rename", str(source), str(destination)))

    def open_append(self, path: Path) -> BinaryIO:
        self.calls.append(("open_append", str(path)))
        return io.BytesIO()


# ---------------------------------------------------------------------------
# Target resolution
# ---------------------------------------------------------------------------

def resolve_target(path: Path, cwd: Path) -> tuple[Path, TargetKind]:
    """Canonicalize *path* (relative to *cwd*) and classify it.

    Raises
    ------
    InvalidTargetError
        When the path does not exist, cannot be resolved (e.g. a symlink
        loop), or is neither a regular file nor a directory.
    """
    candidate = path if path.is_absolute() else cwd / path
    try:
        resolved = candidate.resolve(strict=True)
        mode = resolved.stat().st_mode
    except (OSError, RuntimeError) as exc:
        raise InvalidTargetError(
            f"resolving path: {path}: {getattr(exc, 'strerror', None) or exc}",
        ) from exc

    logger.debug("resolved %s -> %s", path, resolved)
    if not resolved.name:
        raise InvalidTargetError(f"{resolved} has no name to archive under")
    if stat.S_ISREG(mode):
        return resolved, TargetKind.FILE
    if stat.S_ISDIR(mode):
        return resolved, TargetKind.DIRECTORY
    raise InvalidTargetError(f"{resolved} is neither file nor directory")
