"""Domain models for slugpm.

All models are immutable value objects with no behaviour beyond data
access.  They carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Target classification
# ---------------------------------------------------------------------------

class TargetKind(enum.Enum):
    """What a resolved archive target turned out to be."""

    FILE = "file"
    DIRECTORY = "directory"


# ---------------------------------------------------------------------------
# Archive outcome
# ---------------------------------------------------------------------------

class ArchiveAction(enum.Enum):
    """Terminal action performed by an archive operation."""

    MOVED = "moved"
    APPENDED = "appended"


@dataclass(frozen=True, slots=True)
class ArchiveResult:
    """Outcome of a single archive operation."""

    source: Path
    """The target that was archived."""

    destination: Path
    """Where the target (or the appended bytes) ended up."""

    action: ArchiveAction

    bytes_written: int | None = None
    """Number of bytes appended, or ``None`` for moves."""
