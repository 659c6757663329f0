"""First steps: functions, conditions, strings, sequences and small clean-ups."""

from __future__ import annotations

import math
from collections.abc import Sequence

_BANNER = r"""       welcome to...
                 _   _ _
  _ __ _   _ ___| |_| (_)_ __   __ _ ___
 | '__| | | / __| __| | | '_ \ / _` / __|
 | |  | |_| \__ \ |_| | | | | | (_| \__ \
 |_|   \__,_|___/\__|_|_|_| |_|\__, |___/
                               |___/"""


def calculate_price_of_apples(apples: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought at once."""
    return apples if apples > 40 else apples * 2


def call_me(num: int) -> list[str]:
    """Print and return one ring line per call, numbered from 1."""
    lines = [f"Ring! Call number {number}" for number in range(1, num + 1)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """'foo' for 'fizz', 'bar' for 'fuzz', 'baz' for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def intro_message() -> str:
    """The greeting shown by the very first exercise."""
    return "\n".join(
        [
            "Hello and",
            _BANNER,
            "",
            "This exercise compiles successfully. The remaining exercises contain a compiler",
            "or logic error. The central concept behind Rustlings is to fix these errors and",
            "solve the exercises. Good luck!",
            "",
            "The source for this exercise is in `exercises/intro/intro1.rs`. Have a look!",
            "Going forward, the source of the exercises will always be in the "
            "success/failure output.",
        ]
    )


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a growable list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Sequence[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def greeting(is_morning: bool) -> str:
    return "Good morning!" if is_morning else "Good evening!"


def classify_character(character: str) -> str:
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(values: Sequence) -> str:
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def middle_slice(values: Sequence) -> Sequence:
    """Elements at positions 1 to 3."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def circle_area(radius: float) -> float:
    return math.pi * radius**2


def add_optional(total: int, option: int | None) -> int:
    """Add the optional value when there is one."""
    return total if option is None else total + option


def swap_values(value_a, value_b) -> tuple:
    return value_b, value_a