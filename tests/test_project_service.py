"""Tests for project directory creation (core/project_service.py)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from slugpm.core.project_service import ProjectService
from slugpm.exceptions import FileOperationError, InvalidTitleError
from slugpm.infra.filesystem import NullFileOps


class TestProjectService:
    def test_returns_slug_path(self) -> None:
        directory = ProjectService(NullFileOps()).create("Test Project", Path("/work"))
        assert directory == Path("/work/project/test-project")

    def test_creates_directory_once(self) -> None:
        ops = NullFileOps()
        ProjectService(ops).create("My Project!", Path("/work"))
        assert ops.calls == [("create_dir_all", str(Path("/work/project/my-project")))]

    @pytest.mark.parametrize("title", ["!!!", "   ", "-_-"])
    def test_empty_slug_rejected(self, title: str) -> None:
        ops = NullFileOps()
        with pytest.raises(InvalidTitleError):
            ProjectService(ops).create(title, Path("/work"))
        assert ops.calls == []

    def test_raw_error_is_wrapped(self) -> None:
        ops = MagicMock()
        ops.create_dir_all.side_effect = OSError("No space left on device")

        with pytest.raises(FileOperationError, match="creating"):
            ProjectService(ops).create("Demo", Path("/work"))

    def test_non_latin_title_gets_a_project(self) -> None:
        directory = ProjectService(NullFileOps()).create("日本語", Path("/work"))
        assert directory.parent == Path("/work/project")
        assert directory.name
