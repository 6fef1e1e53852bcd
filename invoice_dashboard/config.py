from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class AppConfig:
    # Required for any remote query (hosted store REST endpoint)
    store_url: Optional[str]
    store_anon_key: Optional[str]

    # Defaults
    store_timeout_seconds: float
    log_level: str

    @property
    def rest_url(self) -> str:
        # PostgREST mounts tables under /rest/v1
        return f"{(self.store_url or '').rstrip('/')}/rest/v1"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def log_level() -> str:
    load_dotenv(override=False)
    return (_getenv("LOG_LEVEL", "INFO") or "INFO").upper()


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Missing store values are kept as None; the store client refuses to start without them
    """
    load_dotenv(override=False)

    return AppConfig(
        store_url=_getenv("SUPABASE_URL"),
        store_anon_key=_getenv("SUPABASE_ANON_KEY"),
        store_timeout_seconds=float(_getenv("STORE_TIMEOUT_SECONDS", "30") or "30"),
        log_level=log_level(),
    )
