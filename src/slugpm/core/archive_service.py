"""Core archive service — orchestrates moving and appending into archives.

The actual filesystem work is delegated to a
:class:`~slugpm.core.protocols.FileOps` injected at construction time.
This service is responsible for:

* Deriving the archive directory for the target.
* Making sure the archive directory exists.
* Performing the terminal action (rename or append).
* Ensuring only :class:`~slugpm.exceptions.SlugpmError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct filesystem access.
* Standard input is never touched implicitly; the caller passes the
  stream to :meth:`ArchiveService.append_stream`.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from slugpm.core.models import ArchiveAction, ArchiveResult, TargetKind
from slugpm.core.paths import archive_dir_for_dir, archive_dir_for_file
from slugpm.core.protocols import FileOps
from slugpm.exceptions import FileOperationError, SlugpmError


class ArchiveService:
    """Stateless service that archives files and directories.

    Parameters
    ----------
    ops:
        Any object satisfying the :class:`FileOps` protocol.
    """

    def __init__(self, ops: FileOps) -> None:
        self._ops: FileOps = ops

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def archive(self, path: Path, kind: TargetKind) -> ArchiveResult:
        """Move *path* into its archive directory according to *kind*."""
        if kind is TargetKind.DIRECTORY:
            return self.move_dir(path)
        return self.move_file(path)

    def move_file(self, path: Path) -> ArchiveResult:
        """Move the file *path* to ``<parent>/archive/<name>``."""
        destination = archive_dir_for_file(path.parent) / path.name
        self._move(path, destination)
        return ArchiveResult(path, destination, ArchiveAction.MOVED)

    def move_dir(self, path: Path) -> ArchiveResult:
        """Move the directory *path* to ``<grandparent>/archive/<name>``."""
        destination = archive_dir_for_dir(path.parent) / path.name
        self._move(path, destination)
        return ArchiveResult(path, destination, ArchiveAction.MOVED)

    def append_stream(self, path: Path, stream: BinaryIO) -> ArchiveResult:
        """Append everything readable from *stream* to the archived copy of *path*.

        The destination is the same path :meth:`move_file` would use, so
        repeated calls accumulate content in one file.  The stream is read
        to completion before the single write at the tail.

        Raises
        ------
        FileOperationError
            When the archive directory or file cannot be prepared, or
            reading/writing fails.
        """
        destination = archive_dir_for_file(path.parent) / path.name
        self._ensure_dir(destination.parent)
        try:
            with self._ops.open_append(destination) as handle:
                data = stream.read()
                handle.write(data)
        except SlugpmError:
            raise
        except Exception as exc:
            raise FileOperationError(
                f"appending to {destination}: {exc}",
            ) from exc
        return ArchiveResult(
            path, destination, ArchiveAction.APPENDED, bytes_written=len(data),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_dir(self, directory: Path) -> None:
        try:
            self._ops.create_dir_all(directory)
        except SlugpmError:
            raise
        except Exception as exc:
            raise FileOperationError(
                f"creating {directory}: {exc}",
            ) from exc

    def _move(self, source: Path, destination: Path) -> None:
        self._ensure_dir(destination.parent)
        try:
            self._ops.rename(source, destination)
        except SlugpmError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise FileOperationError(
                f"moving {source} -> {destination}: {exc}",
            ) from exc
