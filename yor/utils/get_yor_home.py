"""Resolve the Yor home directory."""

import os
from pathlib import Path


def get_yor_home() -> Path:
    """Get Yor home directory based on YOR_HOME or default to ~/.yor."""
    yor_home_env = os.environ.get("YOR_HOME")
    if yor_home_env:
        return Path(yor_home_env).expanduser().resolve()
    return Path.home() / ".yor"
