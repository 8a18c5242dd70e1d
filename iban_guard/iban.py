from __future__ import annotations
import logging
import re
from collections.abc import Mapping

from .countries import COUNTRIES, get_country
from .models import UnknownCountryError
from .specification import Specification

logger = logging.getLogger(__name__)

_NON_ALPHANUM = re.compile(r"[^0-9A-Za-z]")
_EVERY_FOUR_CHARS = re.compile(r"(.{4})(?!$)")


def electronic_format(iban: str) -> str:
    """Strip everything but ASCII letters and digits, then uppercase."""
    return _NON_ALPHANUM.sub("", iban).upper()


def print_format(iban: str, separator: str = " ") -> str:
    """Group the electronic format in blocks of 4 chars joined by separator."""
    return _EVERY_FOUR_CHARS.sub(lambda m: m.group(1) + separator, electronic_format(iban))


def is_valid(iban: object) -> bool:
    """Check an IBAN. Never raises; anything invalid returns False."""
    if not isinstance(iban, str):
        return False
    electronic = electronic_format(iban)
    try:
        spec = get_country(electronic[:2])
    except UnknownCountryError:
        logger.debug("Unknown country code in IBAN %r", electronic[:2])
        return False
    return spec.is_valid(electronic)


def to_bban(iban: str, separator: str = " ") -> str:
    """Convert an IBAN to its BBAN.

    Raises UnknownCountryError or InvalidShapeError.
    """
    electronic = electronic_format(iban)
    return get_country(electronic[:2]).to_bban(electronic, separator)


def from_bban(country_code: str, bban: str) -> str:
    """Build the IBAN of a BBAN. Separators in bban are ignored.

    Raises UnknownCountryError or InvalidShapeError.
    """
    return get_country(country_code).from_bban(electronic_format(bban))


def is_valid_bban(country_code: object, bban: object) -> bool:
    if not isinstance(country_code, str) or not isinstance(bban, str):
        return False
    try:
        spec = get_country(country_code)
    except UnknownCountryError:
        return False
    return spec.is_valid_bban(electronic_format(bban))


def available_countries() -> Mapping[str, Specification]:
    """Read-only view of the registry, keyed by country code."""
    return COUNTRIES
