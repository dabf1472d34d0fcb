"""Record types: named fields, tuple-like records, unit records and packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour with a name and a hex code."""

    name: str
    hex: str


class ColorTupleStruct(NamedTuple):
    """A colour as a positional pair of name and hex code."""

    name: str
    hex: str


class UnitStruct:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """A template order to derive new orders from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to be shipped; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("weight_in_grams must be greater than 0")

    def is_international(self) -> bool:
        """Whether the package crosses a border."""
        return self.recipient_country != self.sender_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Shipping fees for the package."""
        return self.weight_in_grams * cents_per_gram