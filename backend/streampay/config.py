"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - claimable_cache_ttl_ms is never negative; unparseable values fall back to 1000

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Lenient TTL parsing: leading digits are honoured ("250ms" → 250), anything
      else falls back to the default instead of refusing to boot
"""

import math
import re
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from streampay.core.domain_types import FingerprintMode

DEFAULT_CACHE_TTL_MS = 1000

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]{1,18})(?![0-9])")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Claimable engine
    claimable_cache_ttl_ms: int = DEFAULT_CACHE_TTL_MS
    claimable_fingerprint_mode: FingerprintMode = FingerprintMode.AUTO
    claimable_cache_prune_threshold: int = 10_000

    @field_validator("claimable_cache_ttl_ms", mode="before")
    @classmethod
    def parse_cache_ttl(cls, v: object) -> int:
        """Accept ints and int-prefixed strings; fall back to the default otherwise."""
        if isinstance(v, bool):
            return DEFAULT_CACHE_TTL_MS
        if isinstance(v, int):
            return max(0, v)
        if isinstance(v, float):
            return max(0, int(v)) if math.isfinite(v) else DEFAULT_CACHE_TTL_MS
        if isinstance(v, str):
            match = _LEADING_INTEGER.match(v)
            if match:
                return max(0, int(match.group(1)))
        return DEFAULT_CACHE_TTL_MS

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
