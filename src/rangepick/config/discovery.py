"""Locate ``rangepick.toml`` for the current invocation.

The nearest file in the start directory or any of its ancestors wins.
``RANGEPICK_CONFIG`` names a file explicitly and disables the search.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "rangepick.toml"
CONFIG_ENV_VAR = "RANGEPICK_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    for directory in (start, *start.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Path of the config file that applies to *start* (default: cwd).

    A ``RANGEPICK_CONFIG`` value that is not an existing file yields None;
    the ancestor search is not tried in that case.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    base = (start or Path.cwd()).resolve()
    return next((c for c in _candidates(base) if c.is_file()), None)
