"""bookoptions error handling."""

from typing import Any

from .types import ErrorCode


class BookOptionsError(Exception):
    """Base exception for bookoptions errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = True,
        recovery_hint: str | None = None,
    ) -> None:
        """Initialize error."""
        super().__init__(message)
        self.code = code.value
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint


class UnrecognizedKeyError(BookOptionsError):
    """Option key is not part of the schema."""

    def __init__(self, key: str) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.UNRECOGNIZED_KEY,
            message=f"unrecognized key: {key}",
            details={"key": key},
            recoverable=True,
            recovery_hint="Run 'bookoptions describe' to list valid options",
        )
        self.key = key


class ParseError(BookOptionsError):
    """Raw value does not match the literal grammar of the option's type."""

    def __init__(self, reason: str, key: str, value: str) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.PARSE_ERROR,
            message=f"{reason}: {key}:{value}",
            details={"key": key, "value": value, "reason": reason},
            recoverable=True,
            recovery_hint="Check the option's type with 'bookoptions describe'",
        )
        self.reason = reason
        self.key = key
        self.value = value


class OptionNotPresentError(BookOptionsError):
    """Option was never set and has no default."""

    def __init__(self, key: str) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.OPTION_NOT_PRESENT,
            message=f"option {key} is not present",
            details={"key": key},
            recoverable=True,
        )
        self.key = key


class WrongTypeError(BookOptionsError):
    """Typed accessor used on a value of another kind."""

    def __init__(self, value_repr: str, expected: str) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.WRONG_TYPE,
            message=f"{value_repr} is not a {expected}",
            details={"value": value_repr, "expected": expected},
            recoverable=False,
        )
        self.expected = expected


class InvalidPathError(BookOptionsError):
    """Resolved path cannot be represented as text."""

    def __init__(self, key: str) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.INVALID_PATH,
            message=f"'{key}''s path contains invalid UTF-8 code",
            details={"key": key},
            recoverable=True,
            recovery_hint="Rename the file or the book root to a valid UTF-8 path",
        )
        self.key = key


class SchemaError(BookOptionsError):
    """The compiled-in option schema is malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.SCHEMA_ERROR,
            message=f"Ill-formatted OPTIONS string: {message}",
            details=details,
            recoverable=False,
            recovery_hint="Fix the option schema shipped with the application",
        )


class ConfigError(BookOptionsError):
    """User configuration file error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize error."""
        super().__init__(
            code=ErrorCode.CONFIG_ERROR,
            message=f"Configuration error: {message}",
            details=details,
            recoverable=True,
            recovery_hint="Check configuration file syntax and values",
        )
