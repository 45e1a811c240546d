"""Custom exception hierarchy for slugpm.

All exceptions that cross layer boundaries must inherit from
:class:`SlugpmError`.  Raw ``OSError``s must NEVER propagate beyond the
infrastructure layer — they must be caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
SlugpmError
├── InputError
│   ├── MissingTitleError
│   ├── InvalidTitleError
│   ├── InvalidTargetError
│   └── InvalidNameError
│       └── NameEncodingError
├── FileOperationError
└── EnvironmentError
"""

from __future__ import annotations


class SlugpmError(Exception):
    """Base exception for all slugpm errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Caller input ----------------------------------------------------------

class InputError(SlugpmError):
    """Raised when the caller supplied unusable input."""


class MissingTitleError(InputError):
    """Raised when no title is available from arguments or standard input."""


class InvalidTitleError(InputError):
    """Raised when a title cannot be decoded or slugifies to nothing."""


class InvalidTargetError(InputError):
    """Raised when an archive target is missing or not a file/directory."""


class InvalidNameError(InputError):
    """Raised when a directory has no usable base name."""


class NameEncodingError(InvalidNameError):
    """Raised when a directory base name is not valid UTF-8."""


# --- Filesystem ------------------------------------------------------------

class FileOperationError(SlugpmError):
    """Raised when a filesystem call (mkdir, rename, open, write) fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SlugpmError):
    """Raised when an optional runtime dependency is not available."""
