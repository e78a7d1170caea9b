import emoji
import pytest

from emoji_spans.classifier import Category, CodepointClassifier, classify
from emoji_spans.tables import EMOJI_BASE_RANGES, emoji_package_base_ranges


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("😀", Category.EMOJI_BASE),
        ("🔥", Category.EMOJI_BASE),
        ("☀", Category.EMOJI_BASE),
        ("❤", Category.EMOJI_BASE),
        ("🫠", Category.EMOJI_BASE),
        ("🏴", Category.EMOJI_BASE),
        ("#", Category.EMOJI_TEXT_DEFAULT),
        ("*", Category.EMOJI_TEXT_DEFAULT),
        ("0", Category.EMOJI_TEXT_DEFAULT),
        ("9", Category.EMOJI_TEXT_DEFAULT),
        ("\U0001F3FB", Category.MODIFIER),
        ("\U0001F3FF", Category.MODIFIER),
        ("\ufe0e", Category.VARIATION_SELECTOR),
        ("\ufe0f", Category.VARIATION_SELECTOR),
        ("\u200d", Category.ZWJ),
        ("\U0001F1E6", Category.REGIONAL_INDICATOR),
        ("\U0001F1FF", Category.REGIONAL_INDICATOR),
        ("\U000E0067", Category.TAG),
        ("\U000E007F", Category.TAG),
        ("a", Category.OTHER),
        ("é", Category.OTHER),
        ("가", Category.OTHER),
        (" ", Category.OTHER),
        ("\u20e3", Category.OTHER),
        ("\ufe0d", Category.OTHER),
    ],
)
def test_classify_characters(ch, expected):
    assert classify(ch) is expected


def test_classify_accepts_code_points():
    assert classify(0x1F600) is Category.EMOJI_BASE
    assert classify(0) is Category.OTHER
    assert classify(0x10FFFF) is Category.OTHER


def test_range_edges():
    assert classify(0x1F3FA) is Category.EMOJI_BASE
    assert classify(0x1F3FB) is Category.MODIFIER
    assert classify(0x1F3FF) is Category.MODIFIER
    assert classify(0x1F400) is Category.EMOJI_BASE
    assert classify(0x1F1E5) is Category.EMOJI_BASE
    assert classify(0x2F) is Category.OTHER
    assert classify(0x3A) is Category.OTHER


@pytest.mark.parametrize("bad", ["", "ab", "😀🔥", -1, 0x110000, 1.5, True, None])
def test_classify_rejects_non_scalars(bad):
    with pytest.raises(ValueError):
        classify(bad)


def test_custom_base_table():
    classifier = CodepointClassifier([(0x41, 0x42)])
    assert classifier.classify("A") is Category.EMOJI_BASE
    assert classifier.classify("B") is Category.EMOJI_BASE
    assert classifier.classify("C") is Category.OTHER
    assert classifier.classify("😀") is Category.OTHER
    assert classifier.classify("\u200d") is Category.ZWJ


def test_overlapping_table_is_rejected():
    with pytest.raises(ValueError, match="Overlapping"):
        CodepointClassifier([(0x30, 0x30)])
    with pytest.raises(ValueError, match="Overlapping"):
        CodepointClassifier([(0x1F3F0, 0x1F3FB)])


def test_builtin_base_ranges_are_sorted_and_disjoint():
    for (_, prev_last), (first, last) in zip(EMOJI_BASE_RANGES, EMOJI_BASE_RANGES[1:]):
        assert first <= last
        assert first > prev_last


@pytest.mark.parametrize("ch", ["😀", "🔥", "❤", "☀", "⭐", "⌚", "©", "🚀", "🧑", "🫠", "🀄", "🈚"])
def test_common_emoji_agree_with_emoji_package(ch):
    assert emoji.is_emoji(ch) or emoji.is_emoji(ch + "\ufe0f")
    assert classify(ch) is Category.EMOJI_BASE


def test_builtin_table_covers_emoji_package_singles():
    singles = [
        key for key in emoji.EMOJI_DATA
        if len(key) == 1 and classify(key) in (Category.EMOJI_BASE, Category.OTHER)
    ]
    covered = [key for key in singles if classify(key) is Category.EMOJI_BASE]
    assert singles
    assert len(covered) / len(singles) >= 0.98


def test_emoji_package_table_builds_a_valid_classifier():
    ranges = emoji_package_base_ranges()
    assert ranges
    classifier = CodepointClassifier(ranges)
    assert classifier.classify("😀") is Category.EMOJI_BASE
    assert classifier.classify("\U0001F3FB") is Category.MODIFIER
    assert classifier.classify("#") is Category.EMOJI_TEXT_DEFAULT
    assert classifier.classify("a") is Category.OTHER
