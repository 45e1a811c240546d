"""Title resolution for the default (create) command.

An interactive terminal means the title comes from the command-line
words; anything piped in takes precedence and only its first line is
used.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import BinaryIO

from slugpm.exceptions import InvalidTitleError, MissingTitleError


def resolve_title(words: Sequence[str], stdin: BinaryIO) -> str:
    """Return the project title from *words* or the first line of *stdin*.

    Raises
    ------
    MissingTitleError
        When the terminal is interactive and no words were given, or the
        piped input's first line is blank.
    InvalidTitleError
        When piped input is not valid UTF-8.
    """
    if stdin.isatty():
        if not words:
            raise MissingTitleError(
                "missing <title>",
                hint="Pass a title as arguments or pipe one on standard input.",
            )
        return " ".join(words)

    raw = stdin.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidTitleError("standard input is not valid UTF-8") from exc

    first_line = text.split("\n", 1)[0].strip()
    if not first_line:
        raise MissingTitleError("standard input is empty")
    return first_line
