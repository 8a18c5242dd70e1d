"""Compile BBAN structure descriptors into matchers.

A descriptor is a concatenation of 3-char blocks: one character-class code
(see CharClass) followed by a 2-digit length, e.g. "F03F07F02" for Belgium.
Each block is one logical group of the BBAN as it is usually printed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .models import CharClass, Segment

logger = logging.getLogger(__name__)

_BLOCK_SIZE = 3


@dataclass(frozen=True)
class CompiledStructure:
    segments: tuple[Segment, ...]
    pattern: re.Pattern[str]

    @property
    def length(self) -> int:
        return sum(s.length for s in self.segments)

    def matches(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None

    def extract(self, value: str) -> list[str] | None:
        """Return the per-block substrings of value, or None if it does not match."""
        match = self.pattern.fullmatch(value)
        if match is None:
            return None
        return list(match.groups())


def _parse_block(block: str) -> Segment:
    code, repeats = block[0], block[1:]
    try:
        char_class = CharClass(code)
    except ValueError:
        raise ValueError(f"Unknown character class {code!r} in block {block!r}") from None
    if not (repeats.isascii() and repeats.isdigit()):
        raise ValueError(f"Invalid length {repeats!r} in block {block!r}")
    return Segment(char_class=char_class, length=int(repeats))


def parse_structure(structure: str) -> CompiledStructure:
    """Parse a structure descriptor into a CompiledStructure.

    Raises ValueError for a malformed descriptor. Registry data is expected to
    be well-formed, so this is a configuration error rather than bad input.
    """
    if not structure or len(structure) % _BLOCK_SIZE:
        raise ValueError(f"Malformed structure descriptor: {structure!r}")

    segments = tuple(
        _parse_block(structure[i : i + _BLOCK_SIZE])
        for i in range(0, len(structure), _BLOCK_SIZE)
    )
    pattern = re.compile("".join(s.pattern for s in segments))
    logger.debug("Compiled structure %s -> %s", structure, pattern.pattern)
    return CompiledStructure(segments=segments, pattern=pattern)
