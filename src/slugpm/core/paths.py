"""Pure path derivation — no I/O, no failure modes.

A file is archived next to itself (``<parent>/archive``) while a
directory is archived one level higher (``<grandparent>/archive``) so
that archiving a directory never nests it inside itself.
"""

from __future__ import annotations

import re
from pathlib import Path

ARCHIVE_DIR_NAME: str = "archive"
"""Base name of every archive directory."""

PROJECT_DIR_NAME: str = "project"
"""Directory (relative to the base) holding slug-named projects."""

_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}-?")


def archive_dir_for_file(parent: Path) -> Path:
    """Return the archive directory for a file living in *parent*."""
    return parent / ARCHIVE_DIR_NAME


def archive_dir_for_dir(parent: Path) -> Path:
    """Return the archive directory for a directory living in *parent*.

    Falls back to ``parent / "archive"`` when *parent* has no parent of
    its own (``/`` or a bare relative name such as ``"."``).
    """
    grandparent = parent.parent
    if grandparent == parent:
        return parent / ARCHIVE_DIR_NAME
    return grandparent / ARCHIVE_DIR_NAME


def project_dir_for(slug: str, base: Path) -> Path:
    """Return ``base/project/<slug>``."""
    return base / PROJECT_DIR_NAME / slug


def strip_date_prefix(name: str) -> str:
    """Drop a single leading ``YYYY-MM-DD`` or ``YYYY-MM-DD-`` prefix."""
    return _DATE_PREFIX.sub("", name, count=1)
