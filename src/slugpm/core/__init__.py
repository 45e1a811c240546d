"""Core / service layer — pure business logic and path derivation.

Rules
-----
* No ``print()`` calls.
* No direct filesystem I/O — everything goes through :class:`FileOps`.
* No imports from ``cli`` or ``infra``.
"""

from slugpm.core.archive_service import ArchiveService
from slugpm.core.models import ArchiveAction, ArchiveResult, TargetKind
from slugpm.core.paths import (
    archive_dir_for_dir,
    archive_dir_for_file,
    project_dir_for,
    strip_date_prefix,
)
from slugpm.core.project_service import ProjectService
from slugpm.core.protocols import FileOps
from slugpm.core.slug import slugify_title

__all__: list[str] = [
    "ArchiveAction",
    "ArchiveResult",
    "ArchiveService",
    "FileOps",
    "ProjectService",
    "TargetKind",
    "archive_dir_for_dir",
    "archive_dir_for_file",
    "project_dir_for",
    "slugify_title",
    "strip_date_prefix",
]
