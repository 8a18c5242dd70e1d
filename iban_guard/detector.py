from __future__ import annotations
import re

from .countries import COUNTRIES
from .iban import electronic_format
from .models import Finding

# Matches IBAN-like tokens: 2 letters, 2 digits, then alphanumeric chars
# with optional single spaces (e.g. "DE89 3704 0044 0532 0130 00" or "DE89370400440532013000")
_IBAN_PATTERN = re.compile(
    r"\b([A-Z]{2}\d{2}(?:[ ]?[A-Z0-9]){11,31})(?=\s|$|[^A-Z0-9])",
    re.ASCII,
)

_VALID_CONFIDENCE = 1.0
# Country, length and BBAN structure fit but the check digits are wrong
_SHAPE_ONLY_CONFIDENCE = 0.6


def _prefix_end(raw: str, length: int) -> int | None:
    """Index in raw just past its first `length` alphanumerics.

    Only a cut at a space counts; anything else would split a token.
    """
    count = 0
    for i, ch in enumerate(raw):
        if ch != " ":
            count += 1
            if count == length:
                end = i + 1
                return end if raw[end : end + 1] == " " else None
    return None


class IbanDetector:
    def detect(self, text: str) -> list[Finding]:
        findings: list[Finding] = []
        pos = 0

        while True:
            match = _IBAN_PATTERN.search(text, pos)
            if match is None:
                break
            start, end = match.start(), match.end()
            pos = end
            raw = match.group(0)
            electronic = electronic_format(raw)
            spec = COUNTRIES.get(electronic[:2])
            if spec is None or len(electronic) < spec.length:
                continue

            # Greedy match swallowed what follows, e.g. a second IBAN after one space
            if len(electronic) > spec.length:
                cut = _prefix_end(raw, spec.length)
                if cut is None:
                    continue
                raw = raw[:cut]
                end = pos = start + cut
                electronic = electronic_format(raw)

            if spec.is_valid(electronic):
                confidence = _VALID_CONFIDENCE
            elif spec.is_valid_bban(electronic[4:]):
                confidence = _SHAPE_ONLY_CONFIDENCE
            else:
                continue

            findings.append(
                Finding(
                    start=start,
                    end=end,
                    text=raw,
                    iban=electronic,
                    country_code=spec.country_code,
                    confidence=confidence,
                )
            )

        return findings
