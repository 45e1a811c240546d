"""Core project service — creates slug-named project directories."""

from __future__ import annotations

from pathlib import Path

from slugpm.core.paths import project_dir_for
from slugpm.core.protocols import FileOps
from slugpm.core.slug import slugify_title
from slugpm.exceptions import FileOperationError, InvalidTitleError, SlugpmError


class ProjectService:
    """Create ``project/<slug>`` directories through an injected :class:`FileOps`."""

    def __init__(self, ops: FileOps) -> None:
        self._ops: FileOps = ops

    def create(self, title: str, base: Path) -> Path:
        """Create the project directory for *title* under *base*.

        Re-running with the same title is a no-op on the directory; the
        path is returned either way.

        Raises
        ------
        InvalidTitleError
            When *title* contains no characters that survive slugification.
        FileOperationError
            When the directory cannot be created.
        """
        slug = slugify_title(title)
        if not slug:
            raise InvalidTitleError(
                f"title {title!r} has no letters or digits to build a slug from",
            )

        directory = project_dir_for(slug, base)
        try:
            self._ops.create_dir_all(directory)
        except SlugpmError:
            raise
        except Exception as exc:
            raise FileOperationError(f"creating {directory}: {exc}") from exc
        return directory
