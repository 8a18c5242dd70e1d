from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class CharClass(str, Enum):
    """Character-class codes used in BBAN structure descriptors."""

    ALPHANUMERIC = "A"
    UPPER_ALPHANUMERIC = "B"
    ALPHA = "C"
    NUMERIC = "F"
    LOWER_ALPHA = "L"
    UPPER_ALPHA = "U"
    LOWER_ALPHANUMERIC = "W"

    @property
    def char_set(self) -> str:
        return _CHAR_SETS[self]


# ASCII ranges only; regex character classes like \w would accept non-ASCII
_CHAR_SETS: dict[CharClass, str] = {
    CharClass.ALPHANUMERIC: "0-9A-Za-z",
    CharClass.UPPER_ALPHANUMERIC: "0-9A-Z",
    CharClass.ALPHA: "A-Za-z",
    CharClass.NUMERIC: "0-9",
    CharClass.LOWER_ALPHA: "a-z",
    CharClass.UPPER_ALPHA: "A-Z",
    CharClass.LOWER_ALPHANUMERIC: "0-9a-z",
}


@dataclass(frozen=True)
class Segment:
    char_class: CharClass
    length: int

    @property
    def pattern(self) -> str:
        return f"([{self.char_class.char_set}]{{{self.length}}})"


@dataclass(frozen=True)
class Finding:
    start: int
    end: int
    text: str
    iban: str  # electronic format
    country_code: str
    confidence: float

    def __len__(self) -> int:
        return self.end - self.start


class IbanError(ValueError):
    """Base class for errors raised by the IBAN operations."""


class UnknownCountryError(IbanError):
    def __init__(self, country_code: str) -> None:
        super().__init__(f"No country with code {country_code}")
        self.country_code = country_code


class InvalidShapeError(IbanError):
    """The value does not match the BBAN structure of its country."""
