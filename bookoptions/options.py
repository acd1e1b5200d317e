"""
Typed option store for a book.

Options are declared once in the schema (see ``schema/options_schema.py``).
A ``BookOptions`` instance knows which keys are valid for each type, holds
the current value of every option that was set or has a default, and
resolves path options against the book's root directory.

Example:
    >>> options = BookOptions()
    >>> options.set("author", "Joan Doe")
    >>> options.set("numbering", "2")
    >>> options.get_i32("numbering")
    2
    >>> options.set("autor", "John Smith")
    Traceback (most recent call last):
        ...
    bookoptions.shared.errors.UnrecognizedKeyError: unrecognized key: autor
"""

import logging
import re
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from .schema.core import OptionDefinition, OptionType, SchemaEntry, SectionMarker
from .schema.options_schema import TEMP_DIR_KEY
from .schema.parser import schema_entries
from .schema.values import OptionValue
from .shared.errors import (
    InvalidPathError,
    OptionNotPresentError,
    ParseError,
    SchemaError,
    UnrecognizedKeyError,
)

logger = logging.getLogger(__name__)

# Order in which the valid-key sets are searched by ``set``
LOOKUP_ORDER = (
    OptionType.STRING,
    OptionType.PATH,
    OptionType.CHARACTER,
    OptionType.BOOLEAN,
    OptionType.INTEGER,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def parse_char(value: str) -> str | None:
    """Parse a single-quoted character literal such as ``' '``."""
    value = value.strip()
    if len(value) != 3 or value[0] != "'" or value[2] != "'" or value[1] == "'":
        return None
    return value[1]


def parse_bool(value: str) -> bool | None:
    """Parse ``true`` or ``false``, case-sensitively."""
    return {"true": True, "false": False}.get(value)


def parse_i32(value: str) -> int | None:
    """Parse a base-10 signed 32-bit integer."""
    if not _INT_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if not _I32_MIN <= number <= _I32_MAX:
        return None
    return number


class BookOptions:
    """Contains the options of a book."""

    def __init__(self, entries: Iterable[SchemaEntry] | None = None, root: str | Path | None = None):
        self.options: dict[str, OptionValue] = {}
        self.valid_keys: dict[OptionType, set[str]] = {option_type: set() for option_type in OptionType}
        self.root = Path(root) if root is not None else Path()

        for entry in schema_entries() if entries is None else entries:
            if isinstance(entry, SectionMarker):
                continue
            if self.is_valid_key(entry.key):
                raise SchemaError(f"duplicate key '{entry.key}'", details={"key": entry.key})
            self.valid_keys[entry.option_type].add(entry.key)
            self._apply_default(entry)

    def _apply_default(self, entry: OptionDefinition) -> None:
        if entry.key == TEMP_DIR_KEY:
            self.set(entry.key, tempfile.gettempdir())
            return
        if entry.default is None:
            return
        try:
            self.set(entry.key, entry.default)
        except ParseError as e:
            raise SchemaError(
                f"invalid default '{entry.default}' for '{entry.key}'",
                details={"key": entry.key, "default": entry.default},
            ) from e

    @property
    def root(self) -> Path:
        """Root directory of the book, used to resolve path options."""
        return self._root

    @root.setter
    def root(self, value: str | Path) -> None:
        self._root = Path(value)

    def option_type(self, key: str) -> OptionType | None:
        """Return the declared type of ``key``, or None if it is not a valid key."""
        for option_type in LOOKUP_ORDER:
            if key in self.valid_keys[option_type]:
                return option_type
        return None

    def is_valid_key(self, key: str) -> bool:
        """Return True if ``key`` is declared by the schema."""
        return self.option_type(key) is not None

    def set(self, key: str, value: str) -> None:
        """
        Set an option from its textual value.

        Args:
            key: Identifier of the option, e.g. "author"
            value: Value of the option as a string

        Raises:
            UnrecognizedKeyError: If ``key`` is not a valid option.
            ParseError: If ``value`` is not of the option's type. The
                previous value, if any, is kept.
        """
        option_type = self.option_type(key)
        if option_type is None:
            raise UnrecognizedKeyError(key)

        if option_type in (OptionType.STRING, OptionType.PATH):
            parsed: str | bool | int | None = value
        elif option_type == OptionType.CHARACTER:
            parsed = parse_char(value)
            if parsed is None:
                raise ParseError("could not parse char", key, value)
        elif option_type == OptionType.BOOLEAN:
            parsed = parse_bool(value)
            if parsed is None:
                raise ParseError("could not parse bool", key, value)
        else:
            parsed = parse_i32(value)
            if parsed is None:
                raise ParseError("could not parse int", key, value)

        self.options[key] = OptionValue(option_type, parsed)
        logger.debug("Set option %s = %r", key, parsed)

    def get(self, key: str) -> OptionValue:
        """Get an option's typed value."""
        try:
            return self.options[key]
        except KeyError:
            raise OptionNotPresentError(key) from None

    def get_str(self, key: str) -> str:
        """Get a string option."""
        return self.get(key).as_str()

    def get_path(self, key: str) -> str:
        """Get a path option, joined onto the book's root path."""
        path = str(self.root / self.get(key).as_path())
        try:
            path.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidPathError(key) from None
        return path

    def get_relative_path(self, key: str) -> str:
        """Get a path option without the book's root path."""
        return self.get(key).as_path()

    def get_bool(self, key: str) -> bool:
        """Get a boolean option."""
        return self.get(key).as_bool()

    def get_char(self, key: str) -> str:
        """Get a char option."""
        return self.get(key).as_char()

    def get_i32(self, key: str) -> int:
        """Get an int option."""
        return self.get(key).as_i32()

    def keys(self) -> list[str]:
        """Keys that currently hold a value."""
        return list(self.options)

    def to_dict(self) -> dict[str, Any]:
        """Convert stored options to plain Python values."""
        return {key: option.value for key, option in self.options.items()}

    def __contains__(self, key: object) -> bool:
        return key in self.options

    def __iter__(self) -> Iterator[str]:
        return iter(self.options)

    def __repr__(self) -> str:
        return f"BookOptions(root={str(self.root)!r}, options={self.options!r})"

    @classmethod
    def description(cls, markdown: bool = False, entries: Iterable[SchemaEntry] | None = None) -> str:
        """
        Return a description of all options valid to pass to a book.

        Args:
            markdown: Whether the output should be formatted in Markdown
            entries: Schema entries to describe; defaults to the built-in schema

        Returns:
            str: One line (plain) or one nested list item (Markdown) per
            option, grouped under the schema's section headings.
        """
        out: list[str] = []
        previous_is_heading = True

        for entry in schema_entries() if entries is None else entries:
            if isinstance(entry, SectionMarker):
                if not previous_is_heading:
                    out.append("\n")
                    previous_is_heading = True
                out.append(f"### {entry.title} ###\n")
                continue

            previous_is_heading = False
            type_name = entry.option_type.display_name
            default = entry.default if entry.default is not None else "not set"
            if markdown:
                out.append(
                    f"- **`{entry.key}`**\n"
                    f"    - **type**: {type_name}\n"
                    f"    - **default value**: `{default}`\n"
                    f"    - {entry.comment}\n"
                )
            else:
                out.append(f"- {entry.key} (type: {type_name}) (default: {default}) {entry.comment}\n")

        return "".join(out)
