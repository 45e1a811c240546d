"""Allow ``python -m slugpm`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m slugpm`` behaves identically to the ``slugpm``
console script.
"""

from __future__ import annotations

from slugpm.cli.app import cli

if __name__ == "__main__":
    cli()
