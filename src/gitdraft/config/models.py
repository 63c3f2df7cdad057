"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GITDRAFT__SECTION__KEY)
3. Repo YAML (.gitdraft/config.yaml)
4. Global YAML (~/.config/gitdraft/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    GITDRAFT__<SECTION>__<KEY>=<VALUE>

Examples:
    GITDRAFT__LOGGING__LEVEL=DEBUG
    GITDRAFT__CHANGES__INCLUDE_UNSTAGED=false
    GITDRAFT__PROMPT__MODEL=gpt-4o
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from gitdraft.config.constants import (
    CONTEXT_LINES_DEFAULT,
    DEFAULT_MODEL,
    SUMMARY_WIDTH_DEFAULT,
    SUMMARY_WIDTH_MIN,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GITDRAFT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Stdout carries the summary, so keep logs quiet by default.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ChangesConfig(BaseModel):
    """Change extraction configuration.

    Env vars:
        GITDRAFT__CHANGES__INCLUDE_UNSTAGED: Diff HEAD against the working tree
        GITDRAFT__CHANGES__DETECT_RENAMES: Pair deletions/additions into renames
        GITDRAFT__CHANGES__CONTEXT_LINES: Context lines per hunk
        GITDRAFT__CHANGES__SUMMARY_WIDTH: Max characters per line summary
    """

    include_unstaged: bool = Field(
        default=True,
        description="Include unstaged and untracked changes. False limits output to the index.",
    )
    detect_renames: bool = Field(
        default=True,
        description="Run rename/copy detection so moved files show as Renamed.",
    )
    context_lines: int = Field(default=CONTEXT_LINES_DEFAULT, ge=0)
    summary_width: int = Field(
        default=SUMMARY_WIDTH_DEFAULT,
        description="Line content longer than this is cut and suffixed with '...'.",
    )

    @field_validator("summary_width")
    @classmethod
    def validate_summary_width(cls, v: int) -> int:
        if v < SUMMARY_WIDTH_MIN:
            raise ValueError(f"summary_width must be at least {SUMMARY_WIDTH_MIN}, got {v}")
        return v


class PromptConfig(BaseModel):
    """Prompt rendering configuration.

    Env vars:
        GITDRAFT__PROMPT__MODEL: Model name written into chat requests
        GITDRAFT__PROMPT__CONTEXT: Extra context appended to every prompt
    """

    model: str = DEFAULT_MODEL
    context: str | None = None


class GitDraftConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    changes: ChangesConfig = Field(default_factory=ChangesConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
