# rodada/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    credencial_hmac_salt: str
    admin_api_key: str
    rate_limit_per_minute: int
    relay_timeout_seconds: float


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        credencial_hmac_salt=os.environ.get("CREDENCIAL_HMAC_SALT", ""),
        admin_api_key=os.environ.get("ADMIN_API_KEY", ""),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        relay_timeout_seconds=float(os.environ.get("RELAY_TIMEOUT_SECONDS", "10")),
    )
