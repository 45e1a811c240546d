"""CLI application entry point and command routing for slugpm.

This module is the **sole error boundary** for the entire application.
It catches :class:`~slugpm.exceptions.SlugpmError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and the infrastructure layer.
* Process state (working directory, stdin, stdout) is passed into
  :func:`main` explicitly so every command is testable.
* Each successful command writes exactly one line to stdout: the
  resulting path or name.  Everything else goes to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO, TextIO

from slugpm.cli import exit_codes
from slugpm.cli.console import Literal, configure_logging, console
from slugpm.exceptions import InvalidNameError, NameEncodingError, SlugpmError
from slugpm.version import __version__

logger = logging.getLogger(__name__)

_COMMANDS: frozenset[str] = frozenset({"archive", "name"})


# ---------------------------------------------------------------------------
# Argument parsers
# ---------------------------------------------------------------------------

def _common_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every filesystem operation to stderr.",
    )
    return parent


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level (create) argument parser.

    The CLI supports:
    * ``slugpm [title words...]``   — create ``project/<slug>``
    * ``slugpm archive <path> [-]`` — archive a file or directory
    * ``slugpm name <dirname>``     — strip a leading date prefix
    * ``slugpm --version``
    """
    parser = argparse.ArgumentParser(
        prog="slugpm",
        description="Project slugs + archiving.",
        epilog="Commands: archive <path> [-], name <dirname>.",
        parents=[_common_options()],
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "title",
        nargs="*",
        help="Project title (ignored when a title is piped on stdin).",
    )
    return parser


def _parse_dash(value: str) -> bool:
    if value != "-":
        raise argparse.ArgumentTypeError(f"expected '-', got {value}")
    return True


def _build_archive_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slugpm archive",
        description=(
            "Move a file to <parent>/archive/<name>, or a directory to "
            "<parent>/../archive/<name>.  With a trailing '-', append stdin "
            "to <parent>/archive/<name> instead of moving."
        ),
        parents=[_common_options()],
    )
    parser.add_argument("target", type=Path, help="File or directory to archive.")
    parser.add_argument(
        "dash",
        nargs="?",
        type=_parse_dash,
        default=False,
        metavar="-",
        help="Append standard input instead of moving.",
    )
    return parser


def _build_name_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slugpm name",
        description="Print the project name excluding a leading YYYY-MM-DD- prefix.",
        parents=[_common_options()],
    )
    parser.add_argument("dirname", help="Directory whose base name to process.")
    return parser


def _split_command(argv: Sequence[str]) -> tuple[list[str], str | None, list[str]]:
    """Split *argv* into (leading options, command, command arguments).

    A command is only recognised as the first non-option token, so titles
    that merely contain the words ``archive`` or ``name`` still create
    projects.
    """
    for index, token in enumerate(argv):
        if token in _COMMANDS:
            return list(argv[:index]), token, list(argv[index + 1:])
        if not token.startswith("-"):
            break
    return list(argv), None, []


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_create(words: Sequence[str], stdin: BinaryIO, stdout: TextIO, cwd: Path) -> int:
    """Resolve a title and create ``project/<slug>`` under *cwd*."""
    from slugpm.cli.title import resolve_title
    from slugpm.core.project_service import ProjectService
    from slugpm.infra.filesystem import LocalFileOps

    title = resolve_title(words, stdin)
    logger.debug("title: %r", title)
    directory = ProjectService(LocalFileOps()).create(title, cwd)
    print(directory.relative_to(cwd), file=stdout)
    return exit_codes.SUCCESS


def _handle_archive(
    target: Path, append: bool, stdin: BinaryIO, stdout: TextIO, cwd: Path,
) -> int:
    """Archive *target*, or append *stdin* to its archived copy."""
    from slugpm.core.archive_service import ArchiveService
    from slugpm.infra.filesystem import LocalFileOps, resolve_target

    resolved, kind = resolve_target(target, cwd)
    service = ArchiveService(LocalFileOps())
    if append:
        result = service.append_stream(resolved, stdin)
    else:
        result = service.archive(resolved, kind)
    logger.debug(
        "%s %s -> %s", result.action.value, result.source, result.destination,
    )
    print(result.destination, file=stdout)
    return exit_codes.SUCCESS


def _handle_name(dirname: str, stdout: TextIO) -> int:
    """Print the base name of *dirname* without its date prefix."""
    from slugpm.core.paths import strip_date_prefix

    base = Path(dirname).name
    if base in ("", ".", ".."):
        raise InvalidNameError(f"invalid directory name: {dirname!r}")
    try:
        base.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise NameEncodingError(
            f"directory name is not valid UTF-8: {base!r}",
        ) from exc

    print(strip_date_prefix(base), file=stdout)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
    cwd: Path | None = None,
) -> int:
    """Run the slugpm CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin, stdout:
        Binary input and text output streams; default to the process
        streams.
    cwd:
        Directory relative paths and ``project/`` are resolved against;
        defaults to the current working directory.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout
    if cwd is None:
        cwd = Path.cwd()

    leading, command, rest = _split_command(argv)

    if command is None:
        args = _build_parser().parse_args(leading)
        configure_logging(args.verbose)
        return _handle_create(args.title, stdin, stdout, cwd)

    # Options given before the command (``slugpm -v archive x``) still apply.
    top = _build_parser().parse_args(leading)

    if command == "archive":
        args = _build_archive_parser().parse_args(rest)
        configure_logging(top.verbose or args.verbose)
        return _handle_archive(args.target, args.dash, stdin, stdout, cwd)

    args = _build_name_parser().parse_args(rest)
    configure_logging(top.verbose or args.verbose)
    return _handle_name(args.dirname, stdout)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SlugpmError as exc:
        console.print("[bold red]Error:[/bold red]", Literal(str(exc)))
        if exc.hint:
            console.print("[yellow]Hint:[/yellow]", Literal(exc.hint))
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n ",
            Literal(f"{type(exc).__name__}: {exc}"),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
