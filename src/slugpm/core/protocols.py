"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so orchestration can be tested without a filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Protocol


class FileOps(Protocol):
    """Contract for filesystem backends.

    Any object that implements these three methods with the correct
    signatures satisfies this protocol structurally (no explicit
    inheritance required).

    Implementations must map all native exceptions to
    :class:`~slugpm.exceptions.SlugpmError` subclasses.
    """

    def create_dir_all(self, path: Path) -> None:
        """Create *path* and any missing parents.  Existing dirs are fine.

        Raises
        ------
        FileOperationError
            When the directory cannot be created.
        """
        ...  # pragma: no cover

    def rename(self, source: Path, destination: Path) -> None:
        """Move *source* to *destination*.

        Must never silently replace an existing *destination*.

        Raises
        ------
        FileOperationError
            When the destination exists or the native rename fails
            (permission denied, cross-device, …).
        """
        ...  # pragma: no cover

    def open_append(self, path: Path) -> BinaryIO:
        """Open *path* for binary appending, creating it if absent.

        The returned object is used as a context manager.

        Raises
        ------
        FileOperationError
            When the file cannot be opened.
        """
        ...  # pragma: no cover
