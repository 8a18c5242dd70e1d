from __future__ import annotations

from .checksum import check_digits, iso13616_prepare, iso7064_mod97_10
from .models import InvalidShapeError
from .structure import CompiledStructure, parse_structure


class Specification:
    """IBAN layout of one country.

    The BBAN structure is compiled the first time it is needed and cached.
    Compiling is deterministic, so two threads racing on the first call at
    worst compile it twice and store equal results.
    """

    def __init__(self, country_code: str, length: int, structure: str, example: str) -> None:
        self.country_code = country_code
        self.length = length
        self.structure = structure
        self.example = example
        self._compiled: CompiledStructure | None = None

    def __repr__(self) -> str:
        return (
            f"Specification({self.country_code!r}, {self.length}, "
            f"{self.structure!r}, {self.example!r})"
        )

    @property
    def bban_length(self) -> int:
        return self.length - 4

    def is_valid(self, iban: str) -> bool:
        """Return True if the electronic-format iban is valid for this country."""
        return (
            len(iban) == self.length
            and iban[:2] == self.country_code
            and self._structure().matches(iban[4:])
            and iso7064_mod97_10(iso13616_prepare(iban)) == 1
        )

    def to_bban(self, iban: str, separator: str = " ") -> str:
        """Return the BBAN part of iban with separator between its blocks."""
        groups = self._structure().extract(iban[4:])
        if groups is None:
            raise InvalidShapeError("Invalid IBAN")
        return separator.join(groups)

    def from_bban(self, bban: str) -> str:
        """Build the IBAN for bban, computing its check digits.

        Generation of an IBAN is the responsibility of the bank servicing the
        account; this only applies the ISO 13616 check digit algorithm.
        """
        if not self.is_valid_bban(bban):
            raise InvalidShapeError("Invalid BBAN")
        return f"{self.country_code}{check_digits(self.country_code, bban)}{bban}"

    def is_valid_bban(self, bban: str) -> bool:
        """Check length and character classes only; a BBAN carries no IBAN check digits."""
        return len(bban) == self.bban_length and self._structure().matches(bban)

    def _structure(self) -> CompiledStructure:
        if self._compiled is None:
            self._compiled = parse_structure(self.structure)
        return self._compiled
