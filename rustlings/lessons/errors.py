"""Reporting failures: name tags, token purchases and positive non-zero integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32 = 32
_I64 = 64
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


class _ParseIntError(ValueError):
    """Text that is not a whole number in the allowed range."""


def _parse_int(text: str, bits: int) -> int:
    if not text:
        raise _ParseIntError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise _ParseIntError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise _ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise _ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """The text of a name tag; raises ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a whole number.
    """
    quantity = _parse_int(item_quantity, _I32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << (_I32 - 1)) <= cost < (1 << (_I32 - 1)):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(enum.Enum):
    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value that cannot become a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


class ParsePosNonzeroError(ValueError):
    """Parsing a positive non-zero integer failed; `error` holds the reason."""

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error

    @property
    def is_creation(self) -> bool:
        return isinstance(self.error, CreationError)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer; raises ParsePosNonzeroError."""
    try:
        value = _parse_int(text, _I64)
    except _ParseIntError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error