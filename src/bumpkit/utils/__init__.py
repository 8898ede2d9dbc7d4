"""Shared utilities: git process helpers and logging."""

from bumpkit.utils._git import decode_bytes, run_git
from bumpkit.utils._logging import close_log_files, create_logger, logger_from_config

__all__ = [
    "close_log_files",
    "create_logger",
    "decode_bytes",
    "logger_from_config",
    "run_git",
]
