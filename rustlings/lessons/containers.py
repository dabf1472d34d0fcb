"""Collections: fruit baskets, lists and a cons list."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, MutableMapping
from dataclasses import dataclass


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 4, "orange": 1}


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add ten of each kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 10)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each value multiplied by two."""
    return [value * 2 for value in values]


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; a tail of None marks the end."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A cons list of two elements."""
    return Cons(1, Cons(2))