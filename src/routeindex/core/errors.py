"""RouteIndex error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Content
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Content (3xxx)
    CONTENT_MALFORMED_ITEM = 3001
    CONTENT_MALFORMED_CONTAINER = 3002
    CONTENT_MISSING_IDENTIFIER = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True)
class RouteIndexError(Exception):
    """Base error with structured context for pipeline callers."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(RouteIndexError):
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

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ContentError(RouteIndexError):
    """Content payloads that cannot be interpreted as nodes or containers."""

    @classmethod
    def malformed_item(cls, reason: str, **details: Any) -> "ContentError":
        return cls(
            code=ErrorCode.CONTENT_MALFORMED_ITEM,
            message=f"Malformed content item: {reason}",
            details=details,
        )

    @classmethod
    def malformed_container(cls, locator: str, reason: str) -> "ContentError":
        return cls(
            code=ErrorCode.CONTENT_MALFORMED_CONTAINER,
            message=f"Malformed container at '{locator}': {reason}",
            details={"locator": locator, "reason": reason},
        )

    @classmethod
    def missing_identifier(cls, locator: str) -> "ContentError":
        return cls(
            code=ErrorCode.CONTENT_MISSING_IDENTIFIER,
            message=f"Contained item at '{locator}' has no ContentItemId",
            details={"locator": locator},
        )


class InternalError(RouteIndexError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
