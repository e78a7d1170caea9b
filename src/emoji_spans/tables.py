# emoji_spans/tables.py
"""
Codepoint range tables for the classifier.

Ranges are inclusive ``(first, last)`` pairs, sorted and disjoint inside each
table. ``EMOJI_BASE_RANGES`` follows the Extended_Pictographic and
Emoji_Presentation properties of ``emoji-data.txt``; regenerate it with
``scripts/build_emoji_tables.py`` when a new Unicode version lands.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from emoji import EMOJI_DATA

Range = Tuple[int, int]

ZWJ = 0x200D
TEXT_PRESENTATION_SELECTOR = 0xFE0E
EMOJI_PRESENTATION_SELECTOR = 0xFE0F
COMBINING_ENCLOSING_KEYCAP = 0x20E3

EMOJI_TEXT_DEFAULT_RANGES: Tuple[Range, ...] = (
    (0x0023, 0x0023),  # number sign
    (0x002A, 0x002A),  # asterisk
    (0x0030, 0x0039),  # digits
)

MODIFIER_RANGES: Tuple[Range, ...] = (
    (0x1F3FB, 0x1F3FF),  # Fitzpatrick types 1-2 .. 6
)

VARIATION_SELECTOR_RANGES: Tuple[Range, ...] = (
    (TEXT_PRESENTATION_SELECTOR, EMOJI_PRESENTATION_SELECTOR),
)

ZWJ_RANGES: Tuple[Range, ...] = (
    (ZWJ, ZWJ),
)

REGIONAL_INDICATOR_RANGES: Tuple[Range, ...] = (
    (0x1F1E6, 0x1F1FF),
)

TAG_RANGES: Tuple[Range, ...] = (
    (0xE0020, 0xE007F),  # tag space .. cancel tag
)

EMOJI_BASE_RANGES: Tuple[Range, ...] = (
    (0x000A9, 0x000A9),  # copyright sign
    (0x000AE, 0x000AE),  # registered sign
    (0x0203C, 0x0203C),
    (0x02049, 0x02049),
    (0x02122, 0x02122),
    (0x02139, 0x02139),
    (0x02194, 0x02199),  # arrows
    (0x021A9, 0x021AA),
    (0x0231A, 0x0231B),  # watch, hourglass
    (0x02328, 0x02328),
    (0x02388, 0x02388),
    (0x023CF, 0x023CF),
    (0x023E9, 0x023F3),
    (0x023F8, 0x023FA),
    (0x024C2, 0x024C2),
    (0x025AA, 0x025AB),
    (0x025B6, 0x025B6),
    (0x025C0, 0x025C0),
    (0x025FB, 0x025FE),
    (0x02600, 0x027BF),  # misc symbols, dingbats
    (0x02934, 0x02935),
    (0x02B05, 0x02B07),
    (0x02B1B, 0x02B1C),
    (0x02B50, 0x02B50),
    (0x02B55, 0x02B55),
    (0x03030, 0x03030),
    (0x0303D, 0x0303D),
    (0x03297, 0x03297),
    (0x03299, 0x03299),
    (0x1F000, 0x1F0FF),  # mahjong, domino, playing cards
    (0x1F10D, 0x1F10F),
    (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171),
    (0x1F17E, 0x1F17F),
    (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A),
    (0x1F1AD, 0x1F1E5),
    (0x1F201, 0x1F20F),  # enclosed ideographic supplement
    (0x1F21A, 0x1F21A),
    (0x1F22F, 0x1F22F),
    (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F),
    (0x1F249, 0x1F3FA),  # misc symbols and pictographs, up to the modifiers
    (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F),  # .. emoticons
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF),  # geometric shapes extended
    (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F),
    (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A),  # supplemental symbols and pictographs
    (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF),  # .. chess, extended-A
    (0x1FC00, 0x1FFFD),  # reserved pictographic space
)


def coalesce(codepoints: Iterable[int]) -> List[Range]:
    """Collapse code points into sorted, inclusive, non-adjacent ranges."""
    ranges: List[Range] = []
    for cp in sorted(set(codepoints)):
        if ranges and cp == ranges[-1][1] + 1:
            ranges[-1] = (ranges[-1][0], cp)
        else:
            ranges.append((cp, cp))
    return ranges


def _in_ranges(cp: int, ranges: Iterable[Range]) -> bool:
    return any(first <= cp <= last for first, last in ranges)


def emoji_package_base_ranges() -> List[Range]:
    """
    Build the base table from the ``emoji`` package instead of the built-in one.

    Only single code point entries of ``EMOJI_DATA`` are used. Anything that
    belongs to another category (modifiers, flag letters, keycap bases, glue)
    is left out so the resulting table stays disjoint from the others.
    """
    reserved = (
        EMOJI_TEXT_DEFAULT_RANGES
        + MODIFIER_RANGES
        + VARIATION_SELECTOR_RANGES
        + ZWJ_RANGES
        + REGIONAL_INDICATOR_RANGES
        + TAG_RANGES
    )
    codepoints = []
    for key in EMOJI_DATA:
        if len(key) != 1:
            continue
        cp = ord(key)
        if _in_ranges(cp, reserved):
            continue
        codepoints.append(cp)
    return coalesce(codepoints)
