from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typedpath.paths.flavor import PathFlavor


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TYPEDPATH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    flavor: PathFlavor = Field(default_factory=PathFlavor.host)
    log_level: str = "INFO"

    @field_validator("flavor", mode="before")
    @classmethod
    def _normalize_flavor(cls, value: str | PathFlavor) -> str | PathFlavor:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            allowed = ", ".join(sorted(logging.getLevelNamesMapping()))
            raise ValueError(f"Invalid log level: {value}. Allowed: {allowed}")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
