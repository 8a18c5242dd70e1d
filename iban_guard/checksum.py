from __future__ import annotations
import re

_LETTER = re.compile(r"[A-Z]")

# Nine digits stay well below 2**31, so each step is small-integer arithmetic
_MOD97_BLOCK = 9


def iso13616_prepare(iban: str) -> str:
    """Move the first 4 chars to the end and replace letters by numbers (A=10 ... Z=35)."""
    value = iban.upper()
    value = value[4:] + value[:4]
    return _LETTER.sub(lambda m: str(ord(m.group()) - ord("A") + 10), value)


def iso7064_mod97_10(digits: str) -> int:
    """ISO 7064 MOD 97-10 of an arbitrarily long digit string."""
    remainder = digits
    while len(remainder) > 2:
        block = remainder[:_MOD97_BLOCK]
        remainder = f"{int(block) % 97}{remainder[len(block):]}"
    return int(remainder) % 97


def check_digits(country_code: str, bban: str) -> str:
    """Return the two check digits making country_code + digits + bban valid."""
    remainder = iso7064_mod97_10(iso13616_prepare(f"{country_code}00{bban}"))
    return f"{98 - remainder:02d}"
