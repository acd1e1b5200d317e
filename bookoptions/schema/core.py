"""
Core definitions for the book option schema.
Provides the option types and the entries produced by parsing the schema text.
"""

from dataclasses import dataclass
from enum import Enum


class OptionType(Enum):
    """Supported option types, valued by their schema token."""

    STRING = "str"
    BOOLEAN = "bool"
    CHARACTER = "char"
    INTEGER = "int"
    PATH = "path"

    @property
    def display_name(self) -> str:
        """Human-readable type name used in generated documentation."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_token(cls, token: str) -> "OptionType | None":
        """Return the type matching a schema token, or None if unknown."""
        try:
            return cls(token)
        except ValueError:
            return None


_DISPLAY_NAMES = {
    OptionType.STRING: "string",
    OptionType.BOOLEAN: "boolean",
    OptionType.CHARACTER: "char",
    OptionType.INTEGER: "integer",
    OptionType.PATH: "path",
}


@dataclass(frozen=True)
class SectionMarker:
    """Documentation heading; carries no key."""

    title: str


@dataclass(frozen=True)
class OptionDefinition:
    """A single option declared by the schema."""

    comment: str
    key: str
    option_type: OptionType
    default: str | None = None


SchemaEntry = SectionMarker | OptionDefinition
