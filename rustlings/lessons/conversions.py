"""Conversions into people and colours, with fallbacks and with explicit errors."""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass

_USIZE_MAX = (1 << 64) - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_CHANNEL_RANGE = range(0, 256)


def _parse_usize(text: str) -> int:
    """Parse an unsigned machine-size integer; raises ValueError on bad input."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonErrorKind(enum.Enum):
    """Why text could not be parsed into a Person."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "age is not a whole number"


class ParsePersonError(ValueError):
    """Text that does not describe a person; `kind` says why."""

    def __init__(self, kind: ParsePersonErrorKind, cause: Exception | None = None):
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause


@dataclass
class Person:
    """A person with a name and an age; the default is 30-year-old John."""

    name: str = "John"
    age: int = 30

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse 'name,age'; raises ParsePersonError when the text is not of that form."""
        if not text:
            raise ParsePersonError(ParsePersonErrorKind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as error:
            raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, error) from error
        return cls(name=name, age=age)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse 'name,age', falling back to the default person on any problem."""
        try:
            return cls.parse(text)
        except ParsePersonError:
            return cls()


class IntoColorErrorKind(enum.Enum):
    """Why values could not become a Color."""

    BAD_LEN = "incorrect number of values"
    INT_CONVERSION = "value outside 0..=255"


class IntoColorError(ValueError):
    """Values that do not make an RGB colour; `kind` says why."""

    def __init__(self, kind: IntoColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, value: Sequence[int]) -> Color:
        """Build a colour from three integers; raises IntoColorError otherwise."""
        if len(value) != 3:
            raise IntoColorError(IntoColorErrorKind.BAD_LEN)
        channels = tuple(value)
        for channel in channels:
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise TypeError(f"colour channels must be integers, not {channel!r}")
        if any(channel not in _CHANNEL_RANGE for channel in channels):
            raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
        red, green, blue = channels
        return cls(red=red, green=green, blue=blue)