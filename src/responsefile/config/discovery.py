"""Locate ``responsefile.toml``.

An explicit ``RESPONSEFILE_CONFIG`` path wins outright. Otherwise each
directory from the starting point up to the filesystem root is checked.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "responsefile.toml"
CONFIG_ENV_VAR = "RESPONSEFILE_CONFIG"


def search_dirs(start: Path | None = None) -> Iterator[Path]:
    """Yield *start* (default: cwd) and every ancestor, nearest first."""
    origin = (start or Path.cwd()).resolve()
    if origin.is_file():
        origin = origin.parent
    yield origin
    yield from origin.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start*, or None.

    A ``RESPONSEFILE_CONFIG`` value that does not name an existing file
    disables discovery instead of falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    return next(
        (d / CONFIG_FILENAME for d in search_dirs(start) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
