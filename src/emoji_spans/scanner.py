from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from emoji_spans.classifier import (
    DEFAULT_CLASSIFIER,
    GLUE_CATEGORIES,
    Category,
    CodepointClassifier,
)
from emoji_spans.tables import COMBINING_ENCLOSING_KEYCAP, EMOJI_PRESENTATION_SELECTOR
from emoji_spans.utils.logging import get_logger

logger = get_logger(__name__)


class SpanKind(str, Enum):
    EMOJI = "Emoji"
    PLAIN = "Plain"


@dataclass(frozen=True)
class Span:
    """A run of text that is uniformly emoji or plain. ``end`` is exclusive."""
    start: int
    end: int
    kind: SpanKind
    text: str

    @property
    def is_emoji(self) -> bool:
        return self.kind is SpanKind.EMOJI

    def __len__(self):
        return self.end - self.start


class SequenceScanner:
    """
    Splits text into emoji and plain spans in one left-to-right pass.

    An emoji sequence is one element (pictograph, flag pair, qualified
    keycap) followed by any glue (skin-tone modifiers, variation selectors,
    tag characters, ZWJ). A ZWJ followed by another element joins both into
    the same sequence. Everything that does not start an element is plain.
    """

    def __init__(self, classifier: Optional[CodepointClassifier] = None):
        self.classifier = classifier or DEFAULT_CLASSIFIER

    def scan(self, text: str) -> List[Span]:
        """Partition ``text`` into alternating emoji / plain spans."""
        categories = self._categorize(text)
        spans: List[Span] = []
        run_kind: Optional[SpanKind] = None
        run_start = 0
        i = 0
        n = len(text)

        while i < n:
            end = self._sequence_end(text, categories, i)
            if end > i:
                kind, next_i = SpanKind.EMOJI, end
            else:
                kind, next_i = SpanKind.PLAIN, i + 1

            if kind is not run_kind:
                if run_kind is not None:
                    spans.append(Span(run_start, i, run_kind, text[run_start:i]))
                run_kind, run_start = kind, i
            i = next_i

        if run_kind is not None:
            spans.append(Span(run_start, n, run_kind, text[run_start:n]))

        return _merge_adjacent(spans)

    def iter_sequences(self, text: str) -> Iterator[Tuple[int, int]]:
        """Yield ``(start, end)`` for every emoji sequence, without merging neighbours."""
        categories = self._categorize(text)
        i = 0
        while i < len(text):
            end = self._sequence_end(text, categories, i)
            if end > i:
                yield i, end
                i = end
            else:
                i += 1

    def _categorize(self, text: str) -> List[Category]:
        classify = self.classifier.classify
        return [classify(ch) for ch in text]

    def _sequence_end(self, text: str, categories: Sequence[Category], i: int) -> int:
        """Return the end of the emoji sequence starting at ``i``, or ``i`` if none starts there."""
        end = self._element_end(text, categories, i)
        if end == i:
            return i

        n = len(text)
        while True:
            joined = False
            while end < n and categories[end] in GLUE_CATEGORIES:
                joined = categories[end] is Category.ZWJ
                end += 1
            if not joined or end >= n:
                return end
            next_end = self._element_end(text, categories, end)
            if next_end == end:
                return end
            end = next_end

    @staticmethod
    def _element_end(text: str, categories: Sequence[Category], i: int) -> int:
        category = categories[i]
        n = len(text)

        if category is Category.EMOJI_BASE:
            return i + 1

        if category is Category.REGIONAL_INDICATOR:
            if i + 1 < n and categories[i + 1] is Category.REGIONAL_INDICATOR:
                return i + 2
            # a lone indicator still has no meaning outside emoji
            return i + 1

        if category is Category.EMOJI_TEXT_DEFAULT:
            # keycaps: 5 FE0F 20E3 and 5 FE0F; a bare 5 20E3 stays plain
            nxt = ord(text[i + 1]) if i + 1 < n else None
            if nxt == EMOJI_PRESENTATION_SELECTOR:
                if i + 2 < n and ord(text[i + 2]) == COMBINING_ENCLOSING_KEYCAP:
                    return i + 3
                return i + 2

        return i


def _merge_adjacent(spans: List[Span]) -> List[Span]:
    merged: List[Span] = []
    for span in spans:
        if merged and merged[-1].kind is span.kind:
            prev = merged.pop()
            logger.debug(f"Merging adjacent {span.kind.value} spans at {prev.start}..{span.end}")
            span = Span(prev.start, span.end, span.kind, prev.text + span.text)
        merged.append(span)
    return merged


DEFAULT_SCANNER = SequenceScanner()


def scan(text: str) -> List[Span]:
    return DEFAULT_SCANNER.scan(text)
