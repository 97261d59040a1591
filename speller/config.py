"""
Speller configuration, read from SPELLER_* environment variables or .env
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from speller.errors import ConfigurationError
from speller.model import TOKEN_PATTERN
from speller.spell import ALPHABET


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SPELLER_", env_file=".env", extra="ignore")

    # Corpus
    CORPUS_PATH: Optional[str] = None
    ENCODING: str = "utf-8"

    # Model
    ALPHABET: str = ALPHABET
    TOKEN_PATTERN: str = TOKEN_PATTERN

    # Logging
    LOG_LEVEL: str = "WARNING"

    @field_validator("ALPHABET")
    @classmethod
    def _non_empty_alphabet(cls, v: str) -> str:
        if not v:
            raise ValueError("alphabet must not be empty")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level {v!r}")
        return v


@lru_cache()
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid speller settings: {exc}") from exc
