"""
bookoptions: schema-driven, typed option store for books.

Every option a book understands is declared once in a text schema, with its
type, default value and description. ``BookOptions`` validates writes against
that schema, and ``BookOptions.description`` renders documentation from it.

Usage:
    >>> from bookoptions import BookOptions
    >>> options = BookOptions(root="/books/mybook")
    >>> options.set("cover", "img/c.png")
    >>> options.get_path("cover")
    '/books/mybook/img/c.png'

CLI Usage:
    $ bookoptions describe --markdown
    $ bookoptions check numbering=2 display_toc=true
"""

from .options import BookOptions
from .schema import OptionType, OptionValue
from .shared.errors import (
    BookOptionsError,
    ConfigError,
    InvalidPathError,
    OptionNotPresentError,
    ParseError,
    SchemaError,
    UnrecognizedKeyError,
    WrongTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "BookOptions",
    "BookOptionsError",
    "ConfigError",
    "InvalidPathError",
    "OptionNotPresentError",
    "OptionType",
    "OptionValue",
    "ParseError",
    "SchemaError",
    "UnrecognizedKeyError",
    "WrongTypeError",
]
