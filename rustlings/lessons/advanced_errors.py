"""Error conversion and descriptive parse errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    _parse_int,
)

_U32 = (0, 2**32 - 1)
_I64 = (-(2**63), 2**63 - 1)


def parse_positive_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text as a positive, nonzero integer; raise ParsePosNonzeroError."""
    try:
        return PositiveNonzeroInteger(_parse_int(s, *_I64))
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if "_" in text or text != text.strip():
        raise ValueError("invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise ValueError("invalid float literal") from None


class ParseClimateError(ValueError):
    """A climate record could not be parsed."""

    class Kind(enum.Enum):
        EMPTY = "empty input"
        BAD_LEN = "incorrect number of fields"
        NO_CITY = "no city name"
        PARSE_INT = "error parsing year"
        PARSE_FLOAT = "error parsing temperature"

    def __init__(self, kind: ParseClimateError.Kind, source: ValueError | None = None) -> None:
        message = kind.value if source is None else f"{kind.value}: {source}"
        super().__init__(message)
        self.kind = kind
        self.source = source

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseClimateError):
            return NotImplemented
        return self.kind is other.kind and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((self.kind, str(self)))


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float


def parse_climate(s: str) -> Climate:
    """Parse "city,year,temp"; raise ParseClimateError describing what is wrong."""
    if not s:
        raise ParseClimateError(ParseClimateError.Kind.EMPTY)
    fields = s.split(",")
    if len(fields) != 3:
        raise ParseClimateError(ParseClimateError.Kind.BAD_LEN)
    city, year_text, temp_text = fields
    if not city:
        raise ParseClimateError(ParseClimateError.Kind.NO_CITY)
    try:
        year = _parse_int(year_text, *_U32)
    except ValueError as err:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_INT, err) from err
    try:
        temp = _parse_float(temp_text)
    except ValueError as err:
        raise ParseClimateError(ParseClimateError.Kind.PARSE_FLOAT, err) from err
    return Climate(city=city, year=year, temp=temp)