"""Core module exports."""

from gitdraft.core.errors import ConfigError, ErrorCode, GitDraftError
from gitdraft.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ErrorCode",
    "GitDraftError",
    "ConfigError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
