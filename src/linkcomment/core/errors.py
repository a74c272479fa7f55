"""linkcomment error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Navigation
- 9xxx: Internal

Navigation errors are values, not faults: the navigator hands them back
inside a ``JumpOutcome`` and reports them to the host as warnings. Nothing
in the core raises them across the host boundary.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Navigation (3xxx)
    FILE_NOT_FOUND = 3001
    SYMBOL_NOT_FOUND = 3002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class LinkCommentError(Exception):
    """Base error with structured context for host responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SYMBOL_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LinkCommentError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class NavigationError(LinkCommentError):
    """A link could not be followed to a definition."""

    @classmethod
    def file_not_found(cls, path: str) -> "NavigationError":
        return cls(
            code=ErrorCode.FILE_NOT_FOUND,
            message=f"File not found: {path}",
            details={"path": path},
        )

    @classmethod
    def symbol_not_found(cls, symbol: str, file_path: str | None) -> "NavigationError":
        where = file_path or "current file"
        return cls(
            code=ErrorCode.SYMBOL_NOT_FOUND,
            message=f'Symbol "{symbol}" not found in {where}',
            details={"symbol": symbol, "file_path": file_path},
        )


class InternalError(LinkCommentError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
