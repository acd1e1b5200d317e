"""Shared types and errors for bookoptions."""

from .errors import (
    BookOptionsError,
    ConfigError,
    InvalidPathError,
    OptionNotPresentError,
    ParseError,
    SchemaError,
    UnrecognizedKeyError,
    WrongTypeError,
)
from .types import ErrorCode

__all__ = [
    "BookOptionsError",
    "ConfigError",
    "ErrorCode",
    "InvalidPathError",
    "OptionNotPresentError",
    "ParseError",
    "SchemaError",
    "UnrecognizedKeyError",
    "WrongTypeError",
]
