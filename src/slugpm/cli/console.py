"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so every command (and ``--help``/``--version``) keeps
working when Rich is not installed.  Nothing here ever writes to
stdout; stdout is reserved for command results.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from slugpm.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class Literal(str):
	"""User-supplied text printed verbatim, never parsed as markup."""


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(
				*(obj if isinstance(obj, Literal) else _strip_markup(str(obj)) for obj in objects),
				file=sys.stderr,
			)
			return
		from rich.text import Text

		rich_console.print(
			*(Text(obj) if isinstance(obj, Literal) else obj for obj in objects),
		)


def _strip_markup(text: str) -> str:
	"""Drop the handful of Rich tags the CLI emits for plain output."""
	for tag in ("[bold red]", "[/bold red]", "[yellow]", "[/yellow]", "[dim]", "[/dim]"):
		text = text.replace(tag, "")
	return text


console = _ConsoleProxy()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

_LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
	"""Attach a single stderr handler to the ``slugpm`` logger.

	``verbose`` selects DEBUG, otherwise only warnings are shown.  Rich's
	``RichHandler`` is used when available.
	"""
	package_logger = logging.getLogger("slugpm")
	for existing in list(package_logger.handlers):
		package_logger.removeHandler(existing)

	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s " + _LOG_FORMAT))
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))

	package_logger.addHandler(handler)
	package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	package_logger.propagate = False
