"""Config module exports."""

from gitdraft.config.loader import load_config
from gitdraft.config.models import (
    ChangesConfig,
    GitDraftConfig,
    LoggingConfig,
    LogOutputConfig,
    PromptConfig,
)

__all__ = [
    "load_config",
    "GitDraftConfig",
    "ChangesConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "PromptConfig",
]
