from typing import List, NamedTuple, Optional

from emoji_spans.scanner import DEFAULT_SCANNER, SequenceScanner, SpanKind


class EmojiRange(NamedTuple):
    """Half-open ``[start, end)`` code point range, so ``text[start:end]`` is the emoji."""
    start: int
    end: int


def emoji_ranges(text: str, scanner: Optional[SequenceScanner] = None) -> List[EmojiRange]:
    """
    Find the ranges of ``text`` that consist only of emoji.

    Args:
        text: Input text
        scanner: Scanner to use instead of the built-in tables

    Returns:
        Ranges in left-to-right order, or an empty list if there is no emoji
    """
    scanner = scanner or DEFAULT_SCANNER
    return [
        EmojiRange(span.start, span.end)
        for span in scanner.scan(text)
        if span.kind is SpanKind.EMOJI
    ]


def is_emoji_only(text: str, scanner: Optional[SequenceScanner] = None) -> bool:
    """
    Check whether ``text`` is made up solely of emoji.

    Empty text is not emoji-only.
    """
    scanner = scanner or DEFAULT_SCANNER
    spans = scanner.scan(text)
    return len(spans) == 1 and spans[0].kind is SpanKind.EMOJI


def strip_emojis(text: str, scanner: Optional[SequenceScanner] = None) -> str:
    """Return a copy of ``text`` keeping only its non-emoji spans, untouched."""
    scanner = scanner or DEFAULT_SCANNER
    return "".join(
        span.text for span in scanner.scan(text) if span.kind is SpanKind.PLAIN
    )


def extract_emojis(text: str, scanner: Optional[SequenceScanner] = None) -> List[str]:
    """List every emoji sequence in ``text``, e.g. ``"a👍🏽🇺🇸"`` -> ``["👍🏽", "🇺🇸"]``."""
    scanner = scanner or DEFAULT_SCANNER
    return [text[start:end] for start, end in scanner.iter_sequences(text)]
