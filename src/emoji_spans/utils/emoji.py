from typing import List, Optional

from emoji_spans.classifier import Category, CodepointClassifier, DEFAULT_CLASSIFIER
from emoji_spans.config import Settings
from emoji_spans.scanner import SequenceScanner
from emoji_spans.span_api import (
    EmojiRange,
    emoji_ranges,
    extract_emojis,
    is_emoji_only,
    strip_emojis,
)
from emoji_spans.tables import emoji_package_base_ranges
from emoji_spans.utils.logging import get_logger

logger = get_logger(__name__)


def build_classifier(settings: Settings) -> CodepointClassifier:
    if settings.classifier.table == "emoji_package":
        ranges = emoji_package_base_ranges()
        logger.debug(f"Using emoji package base table ({len(ranges)} ranges)")
        return CodepointClassifier(ranges)
    return DEFAULT_CLASSIFIER


class EmojiManager:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.classifier = build_classifier(self.settings)
        self.scanner = SequenceScanner(self.classifier)

    def emoji_ranges(self, text: str) -> List[EmojiRange]:
        return emoji_ranges(text, scanner=self.scanner)

    def remove_emoji(self, text: str) -> str:
        return strip_emojis(text, scanner=self.scanner)

    def extract_emojis(self, text: str) -> List[str]:
        return extract_emojis(text, scanner=self.scanner)

    def is_all_emoji(self, text: str) -> bool:
        if self.settings.matching.ignore_whitespace:
            text = "".join(text.split())
        return is_emoji_only(text, scanner=self.scanner)

    def is_emoji(self, ch: str) -> bool:
        """True if the single character ``ch`` is a standalone emoji pictograph or flag letter."""
        return self.classifier.classify(ch) in (Category.EMOJI_BASE, Category.REGIONAL_INDICATOR)
