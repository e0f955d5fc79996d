"""Classify and remove emoji code points from text.

Classification works on single code points against a fixed table of inclusive
Unicode ranges. Multi code point sequences (ZWJ families, keycaps, flags) are
not treated as units: every matching constituent is removed and counted on
its own, and anything between them that does not match is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

CodePointRange = Tuple[int, int]

EMOJI_BLOCKS: Tuple[CodePointRange, ...] = (
    (0x1F300, 0x1F5FF),  # Miscellaneous Symbols and Pictographs
    (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x2600, 0x26FF),  # Miscellaneous Symbols
    (0x2700, 0x27BF),  # Dingbats
    (0x1F100, 0x1F1FF),  # Enclosed Alphanumeric Supplement
    (0x1F200, 0x1F2FF),  # Enclosed Ideographic Supplement
    (0x1F780, 0x1F7FF),  # Geometric Shapes Extended
    (0x1FA00, 0x1FA6F),  # Symbols and Pictographs Extended-A
    (0x1FA70, 0x1FAFF),  # Symbols and Pictographs Extended-B
    (0x1F1E6, 0x1F1FF),  # Regional indicators (flags)
    (0x20E3, 0x20E3),  # Combining enclosing keycap
    (0x200D, 0x200D),  # Zero width joiner
    (0xFE00, 0xFE0F),  # Variation selectors
    (0x1F3FB, 0x1F3FF),  # Fitzpatrick skin tone modifiers
)

# Symbols outside the blocks above that commonly render as emoji.
EMOJI_PICTOGRAPHS: Tuple[CodePointRange, ...] = (
    (0x231A, 0x231B),
    (0x23E9, 0x23EC),
    (0x23F0, 0x23F0),
    (0x23F3, 0x23F3),
    (0x25FD, 0x25FE),
    (0x2614, 0x2615),
    (0x2648, 0x2653),
    (0x267F, 0x267F),
    (0x2693, 0x2693),
    (0x26A1, 0x26A1),
    (0x26AA, 0x26AB),
    (0x26BD, 0x26BE),
    (0x26C4, 0x26C5),
    (0x26CE, 0x26CE),
    (0x26D4, 0x26D4),
    (0x26EA, 0x26EA),
    (0x26F2, 0x26F3),
    (0x26F5, 0x26F5),
    (0x26FA, 0x26FA),
    (0x26FD, 0x26FD),
    (0x2705, 0x2705),
    (0x2728, 0x2728),
    (0x274C, 0x274C),
    (0x274E, 0x274E),
    (0x2753, 0x2755),
    (0x2795, 0x2797),
    (0x27B0, 0x27B0),
    (0x27BF, 0x27BF),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x00A9, 0x00A9),  # copyright sign
    (0x00AE, 0x00AE),  # registered sign
    (0x2122, 0x2122),  # trade mark sign
    (0x3030, 0x3030),
    (0x303D, 0x303D),
)

EMOJI_RANGES: Tuple[CodePointRange, ...] = EMOJI_BLOCKS + EMOJI_PICTOGRAPHS


@dataclass(frozen=True)
class FilterResult:
    """Text with emoji removed, plus how many code points were dropped."""

    text: str
    removed: int


def is_emoji(char: Union[str, int]) -> bool:
    """Return True if a single character (or integer code point) is emoji-like."""

    code = char if isinstance(char, int) else ord(char)
    for low, high in EMOJI_RANGES:
        if low <= code <= high:
            return True
    return False


def remove_emoji(text: str) -> FilterResult:
    """Drop every emoji-like code point from ``text`` in a single pass."""

    kept = []
    removed = 0
    for char in text:
        if is_emoji(char):
            removed += 1
        else:
            kept.append(char)
    return FilterResult(text="".join(kept), removed=removed)


def strip_emoji(text: str) -> str:
    return remove_emoji(text).text


def count_emoji(text: str) -> int:
    return sum(1 for char in text if is_emoji(char))
