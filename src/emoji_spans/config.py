# emoji_spans/config.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Literal, Optional

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

CONFIG_ENV_VAR = "EMOJI_SPANS_CONFIG"
DEFAULT_CONFIG_NAME = "config.toml"


def _resolve_relative_path_to_config_dir(v: Path, info: ValidationInfo) -> Path:
    """
    Resolve relative paths based on config.toml's directory (not cwd).

    Requires the caller to pass config_dir in model_validate(..., context={"config_dir": <Path|str>}).
    """
    ctx = info.context or {}
    base = ctx.get("config_dir")
    if not base:
        return v

    v2 = v.expanduser()
    if v2.is_absolute():
        return v2

    base_dir = Path(base).expanduser()
    return (base_dir / v2).resolve(strict=False)


class ConfigBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="after")
    @classmethod
    def _resolve_path_fields(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, Path):
            return _resolve_relative_path_to_config_dir(v, info)
        return v


class ClassifierConfig(ConfigBaseModel):
    # "builtin": tables shipped in emoji_spans.tables
    # "emoji_package": base pictographs taken from emoji.EMOJI_DATA
    table: Literal["builtin", "emoji_package"] = "builtin"


class MatchingConfig(ConfigBaseModel):
    ignore_whitespace: bool = False  # EmojiManager.is_all_emoji treats "😀 🔥" as emoji-only


class LoggingConfig(ConfigBaseModel):
    level: Literal["debug", "info", "warning", "error", "critical"] = "info"
    console: bool = True
    file: bool = False
    log_dir: Path = Field(default=Path("logs"), description="Directory for rotating log files")


class Settings(ConfigBaseModel):
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Optional[str | Path] = None) -> Settings:
    """
    Load settings from a TOML file.

    Without an explicit path the default location is tried and built-in
    defaults are used when no file exists there. An explicit path must exist.
    """
    if config_path is None:
        p = Path(default_config_path()).expanduser().resolve()
        if not p.is_file():
            return Settings()
    else:
        p = Path(config_path).expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"Config file not found: {p}")

    data = tomllib.loads(p.read_text(encoding="utf-8"))
    return Settings.model_validate(data, context={"config_dir": p.parent})


def default_config_path() -> str:
    return os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME)
