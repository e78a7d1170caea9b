import pytest

from emoji_spans.config import LoggingConfig
from emoji_spans.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests away from a config.toml in the working directory."""
    monkeypatch.setenv("EMOJI_SPANS_CONFIG", str(tmp_path / "missing-config.toml"))
    yield
    configure_logging(LoggingConfig())
