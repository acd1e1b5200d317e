"""
bookoptions schema package.
Provides the option schema, its parser and typed values.
"""

from .core import OptionDefinition, OptionType, SchemaEntry, SectionMarker
from .options_schema import OPTIONS, TEMP_DIR_KEY
from .parser import parse_schema, schema_entries
from .values import OptionValue

__all__ = [
    "OPTIONS",
    "TEMP_DIR_KEY",
    "OptionDefinition",
    "OptionType",
    "OptionValue",
    "SchemaEntry",
    "SectionMarker",
    "parse_schema",
    "schema_entries",
]
