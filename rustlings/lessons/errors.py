"""Error handling: name tags, token costs and validated positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)


def _parse_int(text: str, minimum: int, maximum: int) -> int:
    """Parse a decimal integer strictly, within the given bounds."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    negative = False
    digits = text
    if text[0] in "+-":
        if text[0] == "-":
            if minimum >= 0:
                raise ValueError("invalid digit found in string")
            negative = True
        digits = text[1:]
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if value > maximum:
        raise ValueError("number too large to fit in target type")
    if value < minimum:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, *_I32)
    return quantity * cost_per_item + processing_fee


def purchase(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed quantity and return what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A value cannot become a positive, nonzero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed as a positive, nonzero integer."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(err)

    @property
    def creation(self) -> CreationError | None:
        """The validation error, if that is what went wrong."""
        return self.cause if isinstance(self.cause, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        """The integer parsing error, if that is what went wrong."""
        return None if isinstance(self.cause, CreationError) else self.cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        if isinstance(self.cause, CreationError) or isinstance(other.cause, CreationError):
            return self.cause == other.cause
        return str(self.cause) == str(other.cause)

    def __hash__(self) -> int:
        return hash(str(self.cause))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive, nonzero integer; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(s, *_I64)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err