# mediacat/common/settings.py
from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class ParsingConfig(BaseModel):
    # When False, <id> and <popularity> are assigned as found in the document,
    # without going through Media's validated setters.
    strict: bool = False

    @field_validator("strict", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class Settings(BaseSettings):
    # -------- Logging --------
    log_level: str = "INFO"

    # -------- Sub-configs --------
    parsing: ParsingConfig = ParsingConfig()

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, v):
        name = str(v or "").strip().upper()
        return name if name in _LOG_LEVELS else "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MEDIACAT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mediacat.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
