from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1"
DEFAULT_MODEL = "gemini-2.5-flash-lite"


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_env_float(name: str, default: float | None) -> float | None:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    model: str
    api_base: str
    timeout_s: float | None
    numeric_temperature: float
    descriptive_temperature: float
    log_level: str

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"


def load_settings() -> Settings:
    """Read settings from the environment (and `.env`, if present)."""
    return Settings(
        api_key=_get_env("GEMINI_API_KEY"),
        model=_get_env("GEMINI_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
        api_base=_get_env("GEMINI_API_BASE", DEFAULT_API_BASE) or DEFAULT_API_BASE,
        # requests waits indefinitely unless a timeout is given
        timeout_s=_get_env_float("GEMINI_TIMEOUT_S", None),
        numeric_temperature=_get_env_float("NUMERIC_TEMPERATURE", 0.0),
        descriptive_temperature=_get_env_float("DESCRIPTIVE_TEMPERATURE", 0.6),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
