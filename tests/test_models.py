"""Tests for domain models (core/models.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from slugpm.core.models import ArchiveAction, ArchiveResult, TargetKind


def _make_result(**overrides: object) -> ArchiveResult:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "source": Path("/proj/2025/report.txt"),
        "destination": Path("/proj/2025/archive/report.txt"),
        "action": ArchiveAction.MOVED,
    }
    defaults.update(overrides)
    return ArchiveResult(**defaults)  # type: ignore[arg-type]


class TestArchiveResult:
    def test_fields_accessible(self) -> None:
        r = _make_result()
        assert r.source == Path("/proj/2025/report.txt")
        assert r.destination == Path("/proj/2025/archive/report.txt")
        assert r.action is ArchiveAction.MOVED

    def test_bytes_written_defaults_to_none(self) -> None:
        assert _make_result().bytes_written is None

    def test_frozen(self) -> None:
        r = _make_result()
        with pytest.raises(AttributeError):
            r.destination = Path("/elsewhere")  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _make_result() == _make_result()

    def test_inequality(self) -> None:
        assert _make_result(bytes_written=3) != _make_result(bytes_written=4)


class TestEnums:
    def test_target_kind_values(self) -> None:
        assert {k.value for k in TargetKind} == {"file", "directory"}

    def test_archive_action_values(self) -> None:
        assert {a.value for a in ArchiveAction} == {"moved", "appended"}
