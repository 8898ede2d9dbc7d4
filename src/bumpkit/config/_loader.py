# pyright: reportAny=false, reportExplicitAny=false
"""Configuration sources: TOML files and BUMPKIT_ environment variables.

Every source is read into a plain nested table. Tables are layered with
``deep_merge`` before the result is validated into HarnessConfig.
"""

import copy
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path  # noqa: TC003
from typing import Any, Final

import orjson

from bumpkit.exceptions import ConfigLoadError

type ConfigTable = dict[str, Any]

ENV_PREFIX: Final = "BUMPKIT_"
ENV_KEY_SEPARATOR: Final = "__"


def read_toml_file(path: Path) -> ConfigTable:
    """Read one TOML configuration source.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML. ``line`` and
            ``column`` are set when the parser reports them.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"{path} is not valid TOML: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def tool_table(document: ConfigTable, tool: str = "bumpkit") -> ConfigTable:
    """Return ``[tool.<tool>]`` from a parsed pyproject.toml, or ``{}``."""
    tools = document.get("tool")
    table = tools.get(tool) if isinstance(tools, dict) else None
    return table if isinstance(table, dict) else {}


def deep_merge(base: ConfigTable, override: ConfigTable) -> ConfigTable:
    """Layer `override` on top of `base`.

    Tables present in both are merged key by key; any other value from
    `override` replaces the one in `base`. The result shares no mutable
    values with either input.

    Example:
        >>> deep_merge({"git": {"executable": "git"}}, {"git": {"executable": "g"}})
        {'git': {'executable': 'g'}}
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_env_vars(
    prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> ConfigTable:
    """Collect ``<prefix><SECTION>__<KEY>`` variables into a nested table.

    ``BUMPKIT_FIXTURE__RELEASE_BRANCH=release-v2`` becomes
    ``{"fixture": {"release_branch": "release-v2"}}``. Variables without a
    section separator (``BUMPKIT_DEBUG``) are flags, not settings, and are
    skipped.

    Args:
        prefix: Variable name prefix.
        environ: Variables to read. Defaults to the process environment.
    """
    source = os.environ if environ is None else environ
    table: ConfigTable = {}

    for name, raw in source.items():
        if not name.startswith(prefix):
            continue
        path = name[len(prefix) :].lower().split(ENV_KEY_SEPARATOR)
        if len(path) < 2 or not all(path):  # noqa: PLR2004
            continue

        *sections, key = path
        node = table
        for section in sections:
            child = node.get(section)
            if not isinstance(child, dict):
                child = node[section] = {}
            node = child
        node[key] = parse_string_value(raw)

    return table


def parse_string_value(value: str) -> Any:
    """Convert an environment string to the value it spells.

    Examples:
        >>> parse_string_value("FALSE")
        False
        >>> parse_string_value("42")
        42
        >>> parse_string_value('["a"]')
        ['a']
        >>> parse_string_value("release-v1.0.0")
        'release-v1.0.0'
    """
    flag = value.lower()
    if flag in {"true", "false"}:
        return flag == "true"

    try:
        return int(value)
    except ValueError:
        pass

    if value.startswith(("[", "{")):
        try:
            return orjson.loads(value)
        except orjson.JSONDecodeError:
            return value

    return value
