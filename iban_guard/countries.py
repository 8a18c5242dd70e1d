"""Country registry.

Specifications are loaded from iban_guard/data/countries.toml. Each entry
gives the country code, the full IBAN length, the BBAN structure descriptor
and an example IBAN that must validate.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .models import UnknownCountryError
from .specification import Specification

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


def load_countries(path: Path | None = None) -> dict[str, Specification]:
    with (path or _DATA_DIR / "countries.toml").open("rb") as fh:
        data = tomllib.load(fh)

    countries: dict[str, Specification] = {}
    for entry in data["countries"]:
        code = entry["code"]
        if code in countries:
            raise ValueError(f"Duplicate country code {code!r} in registry")
        countries[code] = Specification(
            country_code=code,
            length=entry["length"],
            structure=entry["structure"],
            example=entry["example"],
        )
    logger.debug("Loaded %d country specifications", len(countries))
    return countries


COUNTRIES: Mapping[str, Specification] = MappingProxyType(load_countries())


def get_country(country_code: str) -> Specification:
    try:
        return COUNTRIES[country_code]
    except KeyError:
        raise UnknownCountryError(country_code) from None
