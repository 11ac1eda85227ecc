"""Collector configuration and environment helpers."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
DEFAULT_DATA_FILE = "stock_prices.json"


class CollectorSettings(BaseSettings):
    """Configuration options for the quote snapshot collector."""

    alphavantage_api_key: str = Field(default="demo", description="Alpha Vantage API key")
    alphavantage_base_url: str = Field(default=DEFAULT_BASE_URL)
    alphavantage_timeout_seconds: float = Field(default=30.0, gt=0)

    stock_symbols: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["U", "PLTR"],
        description="Ticker symbols collected on every run.",
    )
    data_file_path: str = Field(default=DEFAULT_DATA_FILE)

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @field_validator("stock_symbols", mode="before")
    @classmethod
    def _split_symbols(cls, value: Any) -> Any:
        # Accept "AAPL,MSFT" as well as a JSON list from the environment.
        if isinstance(value, str):
            raw = value.strip()
            if raw.startswith("["):
                return json.loads(raw)
            return [part.strip() for part in raw.split(",") if part.strip()]
        return value

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        hidden = {"alphavantage_api_key"}
        return {k: ("***" if k in hidden else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> CollectorSettings:
    """Return cached collector settings with optional overrides."""

    if overrides:
        return CollectorSettings(**overrides)
    return CollectorSettings()


__all__ = [
    "CollectorSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_DATA_FILE",
    "get_settings",
]
