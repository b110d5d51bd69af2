"""Centralized path configuration for steambot.

Respects ``STEAMBOT_HOME`` env var, then ``XDG_DATA_HOME/steambot``,
and falls back to ``~/.steambot``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path


@lru_cache(maxsize=1)
def get_home_dir() -> Path:
    """Return the steambot data directory.

    Resolution order:
    1. ``STEAMBOT_HOME`` environment variable
    2. ``XDG_DATA_HOME/steambot`` (if ``XDG_DATA_HOME`` is set)
    3. ``~/.steambot``
    """
    env = os.environ.get("STEAMBOT_HOME")
    if env:
        return Path(env)
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "steambot"
    return Path.home() / ".steambot"


def get_global_env_path() -> Path:
    return get_home_dir() / ".env"


def get_default_config_path() -> Path:
    return get_home_dir() / "config.yaml"
