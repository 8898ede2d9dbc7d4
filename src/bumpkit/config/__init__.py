"""bumpkit configuration.

Example:
    >>> from bumpkit.config import load_config
    >>> config = load_config()
    >>> config.logging.level
    <LogLevel.INFO: 'info'>
"""

from bumpkit.exceptions import ConfigError, ConfigLoadError

from ._load import CONFIG_FILE_NAME, load_config
from ._loader import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    tool_table,
)
from ._models import (
    FixtureConfig,
    GitConfig,
    HarnessConfig,
    IdentityConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ConfigLoadError",
    "FixtureConfig",
    "GitConfig",
    "HarnessConfig",
    "IdentityConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "load_config",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "tool_table",
]
