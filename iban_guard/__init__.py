"""iban-guard: IBAN/BBAN validation, conversion and check digit generation."""
from .countries import COUNTRIES, get_country, load_countries
from .detector import IbanDetector
from .iban import (
    available_countries,
    electronic_format,
    from_bban,
    is_valid,
    is_valid_bban,
    print_format,
    to_bban,
)
from .models import (
    CharClass,
    Finding,
    IbanError,
    InvalidShapeError,
    Segment,
    UnknownCountryError,
)
from .specification import Specification

__all__ = [
    "COUNTRIES",
    "CharClass",
    "Finding",
    "IbanDetector",
    "IbanError",
    "InvalidShapeError",
    "Segment",
    "Specification",
    "UnknownCountryError",
    "available_countries",
    "electronic_format",
    "from_bban",
    "get_country",
    "is_valid",
    "is_valid_bban",
    "load_countries",
    "print_format",
    "to_bban",
]
