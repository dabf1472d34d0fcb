"""Primitive values, optional values, list ownership and float comparison."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Protocol


class _HasXY(Protocol):
    x: int
    y: int


def classify_char(ch: str) -> str:
    """Describe a character as alphabetical, numerical or neither."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def big_array() -> list[int]:
    """A list of one hundred zeros."""
    return [0] * 100


def nice_slice(values: Sequence[int]) -> Sequence[int]:
    """The second through fourth elements."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a (name, age) pair."""
    name, age = cat
    return f"{name} is {age} years old."


def second(numbers: Sequence[int]) -> int:
    """The second element of a sequence."""
    return numbers[1]


def spell_number(number: object) -> str:
    """Announce a number, spelled however it is given."""
    return f"Spell a Number : {number}"


def print_number(maybe_number: int | None) -> None:
    """Print a number; raise ValueError when there is none."""
    if maybe_number is None:
        raise ValueError("no number to print")
    print(f"printing: {maybe_number}")


def computed_numbers() -> list[int]:
    """Five numbers derived from their positions."""
    return [((index * 1235) + 2) // (4 * 16) for index in range(5)]


def pop_all(values: Sequence[int | None]) -> list[int]:
    """Take values from the end until a missing one or the start is reached."""
    taken: list[int] = []
    for value in reversed(values):
        if value is None:
            break
        taken.append(value)
    return taken


def describe_point(point: _HasXY | None) -> str:
    """Describe the co-ordinates of a point, if there is one."""
    if point is None:
        return "no match"
    return f"Co-ordinates are {point.x},{point.y} "


def fill_vec(values: Iterable[int]) -> list[int]:
    """A new list with the values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def fill_new_vec() -> list[int]:
    """A freshly created list of 22, 44 and 66."""
    return fill_vec(())


def add_through_references(start: int) -> int:
    """Add 100 and then 1000 to the start value."""
    value = start
    value += 100
    value += 1000
    return value


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than the machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_option(res: int, option: int | None) -> int:
    """Add the optional value to res when it is present."""
    if option is not None:
        res += option
    return res