"""Configuration loading for utest.

Settings live in the ``[tool.utest]`` table of the nearest ``pyproject.toml``::

    [tool.utest]
    enabled = true
    delay = 0.05
    timeout = 1.0
    dump_max_length = 40
    reporters = ["ConsoleReporter"]

The ``UTEST_ENABLED`` environment variable overrides ``enabled`` (``0``, ``false``,
``no`` or ``off`` disable test execution).
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from utest.errors import ConfigError
from utest.values import DEFAULT_INDENT, DEFAULT_MAX_LENGTH

logger = logging.getLogger(__name__)

ENABLED_ENV_VAR = "UTEST_ENABLED"
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class UtestConfig:
    """Resolved settings for sessions and suites."""

    enabled: bool = True
    delay: float = 0.0
    timeout: float | None = None
    dump_indent: str = DEFAULT_INDENT
    dump_max_length: int = DEFAULT_MAX_LENGTH
    reporters: list[str] = field(default_factory=list)
    reporter_options: dict[str, dict[str, Any]] = field(default_factory=dict)
    verbosity: int = 0


DEFAULT_CONFIG = UtestConfig()


def find_project_root(start: Path | None = None) -> Path | None:
    """Return the closest directory at or above ``start`` holding a pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").is_file():
            return directory
    return None


def _read_table(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        data = tomllib.load(fh)
    table = data.get("tool", {}).get("utest", {})
    if not isinstance(table, dict):
        msg = f"[tool.utest] in {path} must be a table"
        raise ConfigError(msg)
    return table


def _validate(config: UtestConfig) -> UtestConfig:
    if config.delay < 0:
        msg = f"delay must be >= 0, got {config.delay}"
        raise ConfigError(msg)
    if config.timeout is not None and config.timeout <= 0:
        msg = f"timeout must be > 0, got {config.timeout}"
        raise ConfigError(msg)
    if config.dump_max_length < 0:
        msg = f"dump_max_length must be >= 0, got {config.dump_max_length}"
        raise ConfigError(msg)
    return config


def load_config(path: Path | str | None = None) -> UtestConfig:
    """Load settings from ``path`` (a pyproject.toml) or the nearest project root.

    Unknown keys raise :class:`~utest.errors.ConfigError`.
    """
    if path is None:
        root = find_project_root()
        path = root / "pyproject.toml" if root else None
    elif isinstance(path, str):
        path = Path(path)

    table: dict[str, Any] = {}
    if path is not None and path.is_file():
        table = _read_table(path)
        logger.debug("Loaded utest settings from %s", path)

    known = {f.name for f in fields(UtestConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        msg = f"Unknown utest setting(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    config = replace(DEFAULT_CONFIG, **table)

    env = os.environ.get(ENABLED_ENV_VAR)
    if env is not None:
        config = replace(config, enabled=env.strip().lower() not in _FALSY)

    return _validate(config)


__all__ = ["DEFAULT_CONFIG", "ENABLED_ENV_VAR", "UtestConfig", "find_project_root", "load_config"]
