"""Locate the txtfmt.toml that applies to a working directory.

An explicit ``TXTFMT_CONFIG`` path takes precedence; otherwise the
nearest ``txtfmt.toml`` in the directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "txtfmt.toml"
CONFIG_ENV_VAR = "TXTFMT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``TXTFMT_CONFIG`` that names a missing file disables discovery
    instead of falling back to the walk-up search.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
