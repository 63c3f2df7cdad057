"""gitdraft error types with typed error codes.

Only configuration problems use coded errors (2xxx). Git failures are plain
exception classes in gitdraft.git.errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import ValidationError


class ErrorCode(IntEnum):
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_UNREADABLE = 2003


@dataclass(frozen=True, slots=True)
class GitDraftError(Exception):
    """Base error carrying a code and structured details."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": int(self.code),
            "error": self.error_name,
            "message": self.message,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        return f"[{self.code:d}] {self.error_name}: {self.message}"


class ConfigError(GitDraftError):
    """A config file could not be read, parsed or validated."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> ConfigError:
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> ConfigError:
        return cls(
            code=ErrorCode.CONFIG_UNREADABLE,
            message=f"Cannot read config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> ConfigError:
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def from_validation(cls, exc: ValidationError) -> ConfigError:
        """Report the first failing field; the total count goes into details."""
        problems = exc.errors()
        first = problems[0]
        field_name = ".".join(str(loc) for loc in first["loc"])
        error = cls.invalid_value(field_name, first.get("input"), first["msg"])
        error.details["problems"] = len(problems)
        return error
