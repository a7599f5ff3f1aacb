"""Shared path utilities for configuration and log locations.

This module centralizes how the library discovers locations for its
config and log files.

Policy (portable by default):
- Config: ``DRIVEPATH_CONFIG`` when set, otherwise repository-root
  ``<repo_root>/config/drivepath.toml``
- Log file: ``DRIVEPATH_LOG_FILE`` when set, otherwise no log file
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "DRIVEPATH_CONFIG"
_ENV_LOG_FILE: Final[str] = "DRIVEPATH_LOG_FILE"
_ENV_LOG_LEVEL: Final[str] = "DRIVEPATH_LOG_LEVEL"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<repo_root>/config/drivepath.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "drivepath.toml",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is not requested."""

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(_ENV_LOG_FILE) or "").strip()
    if not candidate:
        return None
    return Path(candidate).expanduser().resolve()


def default_log_level(env: Mapping[str, str] | None = None) -> str:
    """Get the console log level name, ``WARNING`` unless overridden."""

    mapping = env if env is not None else os.environ
    candidate = (mapping.get(_ENV_LOG_LEVEL) or "").strip().upper()
    return candidate or "WARNING"


__all__ = [
    "default_config_path",
    "default_log_file",
    "default_log_level",
    "resolve_overridable_path",
]
