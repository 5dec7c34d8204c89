# =====================================================================
# File: tokargs_pkg/utils/files.py
# Filesystem helpers (configuration file discovery)
# =====================================================================
from __future__ import annotations
import os
from pathlib import Path

from .constants import CONFIG_ENV, CONFIG_FILENAME


def find_config(explicit: str | None = None) -> Path | None:
    """Locate the configuration file (explicit path, environment, then cwd and its parents)."""
    if explicit:
        return Path(explicit)

    from_env = os.environ.get(CONFIG_ENV)
    if from_env:
        return Path(from_env)

    here = Path.cwd().resolve()
    for p in [here, *here.parents]:
        candidate = p / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    return None
