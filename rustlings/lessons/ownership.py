"""Ownership and options: report cards, filled lists, optional values and shared work."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

from .data import Point

T = TypeVar("T")

_FILL_VALUES = (22, 44, 66)


@dataclass
class ReportCard(Generic[T]):
    """A report card whose grade may be a number or a letter."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a new list holding the values followed by 22, 44 and 66; the input is untouched."""
    return [*values, *_FILL_VALUES]


def new_filled_vec() -> list[int]:
    """A fresh list holding 22, 44 and 66."""
    return list(_FILL_VALUES)


def get_char(data: str) -> str:
    """The last character of the text; raises ValueError for empty text."""
    if not data:
        raise ValueError("cannot take the last character of an empty string")
    return data[-1]


def string_uppercase(data: str) -> str:
    """Print the text in upper case and return it."""
    upper = data.upper()
    print(upper)
    return upper


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left: 5 before 22 o'clock, 0 until 24, None for impossible hours."""
    if time_of_day < 22:
        return 5
    if time_of_day > 24:
        return None
    return 0


def drain_optionals(values: MutableSequence[int | None]) -> list[int]:
    """Pop values off the end until the list is empty or a missing value is met.

    Returns the values taken, in the order they were popped.
    """
    taken = []
    while values:
        value = values.pop()
        if value is None:
            break
        print(f"current value: {value}")
        taken.append(value)
    return taken


def describe_point(point: Point | None) -> str:
    """Describe the co-ordinates of a point, or say there is none."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum every `workers`-th number in parallel; entry i sums the numbers n with n % workers == i."""
    if workers <= 0:
        raise ValueError("at least one worker is needed")
    shared: Sequence[int] = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))