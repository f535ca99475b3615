"""Locating files relative to the project checkout."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional


ROOT_ENV_VAR = "ACTIVITY_SYSTEM_ROOT"
SENTINELS = ("pyproject.toml", ".git", "config.yaml")


def _ancestors(path: Path) -> Iterable[Path]:
    yield path
    yield from path.parents


def find_project_root(start: Optional[Path] = None) -> Path:
    """Nearest directory at or above ``start`` (default: cwd) holding a sentinel.

    ``ACTIVITY_SYSTEM_ROOT`` wins when it names an existing directory. Falls
    back to the current directory when nothing matches.
    """
    env_root = os.getenv(ROOT_ENV_VAR)
    if env_root:
        root = Path(env_root).expanduser().resolve()
        if root.is_dir():
            return root

    origin = Path(start).resolve() if start is not None else Path.cwd()
    for directory in _ancestors(origin):
        if any((directory / name).exists() for name in SENTINELS):
            return directory
    return Path.cwd()


def resolve_project_path(path_str: str, root: Optional[Path] = None) -> Path:
    """Absolute paths pass through; relative ones hang off the project root."""
    path = Path(path_str).expanduser()
    if path.is_absolute():
        return path
    return ((root or find_project_root()) / path).resolve()
