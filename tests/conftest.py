"""Shared pytest fixtures and configuration for the slugpm test suite.

Guidelines
----------
* Core tests must be pure — use :class:`~slugpm.infra.filesystem.NullFileOps`.
* Filesystem tests only touch ``tmp_path``.
* Process state (cwd, stdin, stdout) is always injected, never inherited.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest


class TtyBytesIO(io.BytesIO):
    """In-memory stdin that reports itself as an interactive terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def tty_stdin() -> TtyBytesIO:
    return TtyBytesIO()


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    package_logger = logging.getLogger("slugpm")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
