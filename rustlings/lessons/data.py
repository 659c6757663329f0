"""Structured data: commands, messages, records, baskets, score tables and linked lists."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import NamedTuple, Union

_U8_MAX = 255


class Command(enum.Enum):
    """A transformation applied to a string by `transformer`."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to a string the given number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("the number of appends cannot be negative")


def transformer(inputs: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in inputs:
        match command:
            case Append(times=times):
                output.append(text + "bar" * times)
            case Command.TRIM:
                output.append(text.strip())
            case Command.UPPERCASE:
                output.append(text.upper())
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Quit:
    pass


Message = Union[Move, Echo, ChangeColor, Quit]


@dataclass
class MachineState:
    """A small machine driven by messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Update the state according to one message."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class ColorClassicStruct:
    red: int
    green: int
    blue: int


class ColorTupleStruct(NamedTuple):
    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A value without fields."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A parcel between two countries; it must weigh something."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.recipient_country != self.sender_country

    def get_fees(self, cents_per_gram: int) -> int:
        return cents_per_gram * self.weight_in_grams


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def default_fruit_basket() -> dict[str, int]:
    """A basket of three kinds of fruit, seven pieces in all."""
    return {"banana": 2, "apple": 1, "mango": 4}


def fill_fruit_basket(basket: dict[Fruit, int]) -> dict[Fruit, int]:
    """Add two of every fruit kind not yet in the basket; existing counts stay."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)
    return basket


@dataclass
class Team:
    name: str
    goals_scored: int
    goals_conceded: int


def _goals(text: str) -> int:
    value = int(text)
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _checked_add(a: int, b: int) -> int:
    total = a + b
    if total > _U8_MAX:
        raise OverflowError("goal count overflowed")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Sum goals scored and conceded per team from lines 'team1,team2,goals1,goals2'."""
    scores: dict[str, Team] = {}

    def add(name: str, scored: int, conceded: int) -> None:
        previous = scores.get(name)
        if previous is None:
            scores[name] = Team(name, scored, conceded)
        else:
            scores[name] = Team(
                name,
                _checked_add(scored, previous.goals_scored),
                _checked_add(conceded, previous.goals_conceded),
            )

    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _goals(fields[2]), _goals(fields[3])
        add(team_1, score_1, score_2)
        add(team_2, score_2, score_1)
    return scores


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; None ends the list."""

    value: int
    next: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.next


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Cons(3)))