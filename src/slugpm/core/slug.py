"""Title → slug transformation.

Pure and total: any string maps to a (possibly empty) slug made only of
``[a-z0-9-]``.
"""

from __future__ import annotations

from slugify import slugify


def slugify_title(title: str) -> str:
    """Convert free text into a lowercase, hyphen-separated identifier.

    Non-ASCII text is transliterated first (``"Łódź"`` → ``"lodz"``,
    ``"Straße"`` → ``"strasse"``); every remaining run of non-alphanumeric
    characters becomes a single hyphen, and hyphens at either end are
    trimmed.  Only symbol-only input yields an empty slug.

    >>> slugify_title("My Project!")
    'my-project'
    """
    return slugify(title)
