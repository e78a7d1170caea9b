import bisect
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from emoji_spans import tables
from emoji_spans.utils.logging import get_logger

logger = get_logger(__name__)

MAX_CODEPOINT = 0x10FFFF


class Category(str, Enum):
    """Emoji-relevant class of a single code point."""
    EMOJI_BASE = "EmojiBase"
    EMOJI_TEXT_DEFAULT = "EmojiTextDefault"
    MODIFIER = "Modifier"
    VARIATION_SELECTOR = "VariationSelector"
    ZWJ = "ZWJ"
    REGIONAL_INDICATOR = "RegionalIndicator"
    TAG = "Tag"
    OTHER = "Other"


# Categories that only ever attach to an emoji that is already in progress.
GLUE_CATEGORIES = frozenset({
    Category.MODIFIER,
    Category.VARIATION_SELECTOR,
    Category.ZWJ,
    Category.TAG,
})

TableEntry = Tuple[int, int, Category]


def _build_table(base_ranges: Iterable[tables.Range]) -> List[TableEntry]:
    entries: List[TableEntry] = []
    for ranges, category in (
        (base_ranges, Category.EMOJI_BASE),
        (tables.EMOJI_TEXT_DEFAULT_RANGES, Category.EMOJI_TEXT_DEFAULT),
        (tables.MODIFIER_RANGES, Category.MODIFIER),
        (tables.VARIATION_SELECTOR_RANGES, Category.VARIATION_SELECTOR),
        (tables.ZWJ_RANGES, Category.ZWJ),
        (tables.REGIONAL_INDICATOR_RANGES, Category.REGIONAL_INDICATOR),
        (tables.TAG_RANGES, Category.TAG),
    ):
        entries.extend((first, last, category) for first, last in ranges)
    entries.sort()

    for prev, cur in zip(entries, entries[1:]):
        if cur[0] <= prev[1]:
            raise ValueError(
                f"Overlapping ranges U+{prev[0]:04X}..U+{prev[1]:04X} ({prev[2].value}) "
                f"and U+{cur[0]:04X}..U+{cur[1]:04X} ({cur[2].value})"
            )
    return entries


class CodepointClassifier:
    """
    Maps a code point to its Category through a sorted table of disjoint ranges.

    Lookup is a bisect over the range starts, so cost grows with the log of
    the number of ranges. Instances are immutable after construction and safe
    to share between threads.
    """

    def __init__(self, base_ranges: Optional[Sequence[tables.Range]] = None):
        if base_ranges is None:
            base_ranges = tables.EMOJI_BASE_RANGES
        self._entries = tuple(_build_table(base_ranges))
        self._starts = tuple(first for first, _, _ in self._entries)
        logger.debug(f"Built classifier table with {len(self._entries)} ranges")

    def __len__(self):
        return len(self._entries)

    def classify(self, scalar: Union[int, str]) -> Category:
        cp = _to_codepoint(scalar)
        idx = bisect.bisect_right(self._starts, cp) - 1
        if idx >= 0:
            first, last, category = self._entries[idx]
            if first <= cp <= last:
                return category
        return Category.OTHER


def _to_codepoint(scalar: Union[int, str]) -> int:
    if isinstance(scalar, str):
        if len(scalar) != 1:
            raise ValueError(f"Expected a single character, got {len(scalar)}: {scalar!r}")
        return ord(scalar)
    if isinstance(scalar, bool) or not isinstance(scalar, int):
        raise ValueError(f"Expected a code point or character, got {type(scalar).__name__}")
    if not 0 <= scalar <= MAX_CODEPOINT:
        raise ValueError(f"Code point out of range: {scalar:#x}")
    return scalar


DEFAULT_CLASSIFIER = CodepointClassifier()


def classify(scalar: Union[int, str]) -> Category:
    """Classify one code point (int or 1-char str) with the built-in tables."""
    return DEFAULT_CLASSIFIER.classify(scalar)
