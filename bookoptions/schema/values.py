"""Typed option values."""

from dataclasses import dataclass

from ..shared.errors import WrongTypeError
from .core import OptionType


@dataclass(frozen=True)
class OptionValue:
    """A value tagged with exactly one option type."""

    kind: OptionType
    value: str | bool | int

    def __repr__(self) -> str:
        return f"{self.kind.name.title()}({self.value!r})"

    def _narrow(self, kind: OptionType, expected: str):
        if self.kind is not kind:
            raise WrongTypeError(repr(self), expected)
        return self.value

    def as_str(self) -> str:
        """Return the value if it is a string."""
        return self._narrow(OptionType.STRING, "string")

    def as_path(self) -> str:
        """Return the value if it is a path."""
        return self._narrow(OptionType.PATH, "path")

    def as_bool(self) -> bool:
        """Return the value if it is a boolean."""
        return self._narrow(OptionType.BOOLEAN, "bool")

    def as_char(self) -> str:
        """Return the value if it is a single character."""
        return self._narrow(OptionType.CHARACTER, "char")

    def as_i32(self) -> int:
        """Return the value if it is an integer."""
        return self._narrow(OptionType.INTEGER, "i32")
