"""Runtime settings for the itinerary service."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.4
    request_timeout: float = 60.0
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def backend_configured(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and ``.env`` if present)."""
        load_dotenv()
        api_key = (os.getenv("OPENAI_API_KEY") or "").strip() or None
        raw_origins = os.getenv("ITINERARY_AGENT_ALLOWED_ORIGINS") or "*"
        origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
        return cls(
            openai_api_key=api_key,
            model=os.getenv("ITINERARY_AGENT_MODEL") or "gpt-4o-mini",
            temperature=_float_env("ITINERARY_AGENT_TEMPERATURE", 0.4),
            request_timeout=_float_env("ITINERARY_AGENT_TIMEOUT", 60.0),
            allowed_origins=origins or ["*"],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
