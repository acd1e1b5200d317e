"""
Parser for the option schema text.
Turns the declarative schema into an ordered sequence of entries.
"""

import logging
from functools import lru_cache

from ..shared.errors import SchemaError
from .core import OptionDefinition, OptionType, SchemaEntry, SectionMarker
from .options_schema import OPTIONS

logger = logging.getLogger(__name__)


def parse_line(line: str) -> SchemaEntry | None:
    """Parse a single schema line; returns None for blank lines."""
    line = line.strip()
    if not line:
        return None

    if line.startswith("#"):
        # title and comment keep their spacing; description renders them verbatim
        return SectionMarker(title=line[1:])

    content, _, comment = line.partition("#")
    fields = [part.strip() for part in content.split(":", 2)]
    if len(fields) < 2 or not fields[0]:
        raise SchemaError(f"expected 'key:type' in line '{line}'", details={"line": line})

    key, token = fields[0], fields[1]
    option_type = OptionType.from_token(token)
    if option_type is None:
        raise SchemaError(f"unrecognized type '{token}'", details={"line": line, "key": key})

    default = fields[2] if len(fields) > 2 else None
    return OptionDefinition(comment=comment, key=key, option_type=option_type, default=default)


def parse_schema(text: str) -> list[SchemaEntry]:
    """
    Parse schema text into entries, preserving declaration order.

    Raises:
        SchemaError: On an unknown type token, a malformed line or a key
            declared twice.
    """
    entries: list[SchemaEntry] = []
    seen: set[str] = set()

    for line in text.splitlines():
        entry = parse_line(line)
        if entry is None:
            continue
        if isinstance(entry, OptionDefinition):
            if entry.key in seen:
                raise SchemaError(f"duplicate key '{entry.key}'", details={"key": entry.key})
            seen.add(entry.key)
        entries.append(entry)

    logger.debug("Parsed %d schema entries (%d options)", len(entries), len(seen))
    return entries


@lru_cache(maxsize=1)
def schema_entries() -> tuple[SchemaEntry, ...]:
    """Return the parsed built-in schema, computed once per process."""
    return tuple(parse_schema(OPTIONS))
