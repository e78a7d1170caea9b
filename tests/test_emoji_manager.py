from emoji_spans.classifier import DEFAULT_CLASSIFIER
from emoji_spans.config import ClassifierConfig, MatchingConfig, Settings
from emoji_spans.utils.emoji import EmojiManager


def test_default_manager_uses_builtin_tables():
    manager = EmojiManager()
    assert manager.classifier is DEFAULT_CLASSIFIER
    assert manager.emoji_ranges("Hi 😀!") == [(3, 4)]
    assert manager.remove_emoji("A😀B🔥C") == "ABC"
    assert manager.extract_emojis("a👍🏽b🇺🇸") == ["👍🏽", "🇺🇸"]


def test_is_all_emoji_strict_by_default():
    manager = EmojiManager()
    assert manager.is_all_emoji("😀🔥") is True
    assert manager.is_all_emoji("😀 🔥") is False
    assert manager.is_all_emoji("") is False


def test_is_all_emoji_can_ignore_whitespace():
    manager = EmojiManager(Settings(matching=MatchingConfig(ignore_whitespace=True)))
    assert manager.is_all_emoji("😀 🔥\n") is True
    assert manager.is_all_emoji("😀 x") is False
    assert manager.is_all_emoji("   ") is False


def test_is_emoji():
    manager = EmojiManager()
    assert manager.is_emoji("😀") is True
    assert manager.is_emoji("🇺") is True
    assert manager.is_emoji("#") is False
    assert manager.is_emoji("\U0001F3FD") is False
    assert manager.is_emoji("a") is False


def test_emoji_package_table():
    manager = EmojiManager(Settings(classifier=ClassifierConfig(table="emoji_package")))
    assert manager.classifier is not DEFAULT_CLASSIFIER
    assert manager.emoji_ranges("Hi 😀!") == [(3, 4)]
    assert manager.is_all_emoji("👍🏽") is True
    assert manager.remove_emoji("ok 🚀") == "ok "
