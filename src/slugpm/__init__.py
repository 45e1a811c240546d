"""slugpm — slug-named project folders and sibling archive directories.

Creates ``project/<slug>`` directories from free-text titles and moves
(or appends to) files and directories in neighbouring ``archive/`` folders.
"""

from slugpm.version import __version__

__all__: list[str] = ["__version__"]
