"""Infrastructure layer — real filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~slugpm.exceptions.SlugpmError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from slugpm.infra.filesystem import LocalFileOps, NullFileOps, resolve_target

__all__: list[str] = [
    "LocalFileOps",
    "NullFileOps",
    "resolve_target",
]
