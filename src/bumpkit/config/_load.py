# pyright: reportAny=false, reportExplicitAny=false
"""Configuration discovery and loading."""

import os
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from bumpkit.config._loader import (
    ConfigTable,
    deep_merge,
    parse_env_vars,
    read_toml_file,
    tool_table,
)
from bumpkit.config._models import HarnessConfig, LogLevel
from bumpkit.exceptions import ConfigLoadError

CONFIG_FILE_NAME: Final = "bumpkit.toml"
PYPROJECT_FILE_NAME: Final = "pyproject.toml"


def _pyproject_section(path: Path) -> ConfigTable:
    """Read ``[tool.bumpkit]`` from pyproject.toml; ``{}`` when absent."""
    if not path.is_file():
        return {}
    return tool_table(read_toml_file(path))


def load_config(
    *,
    config_path: Path | None = None,
    project_root: Path | None = None,
    include_env: bool = True,
) -> HarnessConfig:
    """Load configuration from all sources.

    Sources are merged from lowest to highest precedence:

    1. Built-in defaults
    2. ``[tool.bumpkit]`` in ``<project_root>/pyproject.toml``
    3. ``<project_root>/bumpkit.toml``
    4. ``config_path``, when given
    5. ``BUMPKIT_<SECTION>__<KEY>`` environment variables

    ``BUMPKIT_DEBUG`` set to any non-empty value forces the debug log level.

    Args:
        config_path: Explicit config file. Must exist.
        project_root: Directory searched for config files. Defaults to the
            current working directory.
        include_env: Whether to apply environment variable overrides.

    Returns:
        The validated configuration.

    Raises:
        ConfigLoadError: If a file cannot be parsed, the explicit config file
            is missing, or the merged values fail validation.
    """
    root = project_root if project_root is not None else Path.cwd()

    merged: ConfigTable = _pyproject_section(root / PYPROJECT_FILE_NAME)

    local_file = root / CONFIG_FILE_NAME
    if local_file.is_file():
        merged = deep_merge(merged, read_toml_file(local_file))

    if config_path is not None:
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise ConfigLoadError(msg, path=config_path)
        merged = deep_merge(merged, read_toml_file(config_path))

    if include_env:
        merged = deep_merge(merged, parse_env_vars())
        if os.environ.get("BUMPKIT_DEBUG"):
            merged = deep_merge(merged, {"logging": {"level": LogLevel.DEBUG.value}})

    try:
        return HarnessConfig.model_validate(merged)
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ConfigLoadError(msg, path=config_path) from e
