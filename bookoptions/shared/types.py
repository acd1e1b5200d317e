"""Shared type definitions for bookoptions."""

from enum import Enum


class ErrorCode(Enum):
    """Error codes for structured error reporting."""

    UNRECOGNIZED_KEY = "UNRECOGNIZED_KEY"
    PARSE_ERROR = "PARSE_ERROR"
    OPTION_NOT_PRESENT = "OPTION_NOT_PRESENT"
    WRONG_TYPE = "WRONG_TYPE"
    INVALID_PATH = "INVALID_PATH"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
