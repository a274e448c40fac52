from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

BASE_URL = "https://anichin.cafe"

HEADERS = MappingProxyType(
    {
        "user-agent": "Mozilla/5.0 (Linux; Android 14) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/125.0 Mobile Safari/537.36",
        "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "accept-language": "id-ID,id;q=0.9,en-US;q=0.8,en;q=0.7",
    }
)


@dataclass(frozen=True)
class Settings:
    base_url: str = BASE_URL
    headers: Mapping[str, str] = field(default_factory=lambda: HEADERS)
    # None leaves the transport default in place (no timeout)
    request_timeout: Optional[float] = None
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    timeout = env.get("ANICHIN_TIMEOUT", "").strip()
    return Settings(
        base_url=env.get("ANICHIN_BASE_URL", BASE_URL).rstrip("/") or BASE_URL,
        request_timeout=float(timeout) if timeout else None,
        host=env.get("ANICHIN_HOST", "0.0.0.0"),
        port=int(env.get("ANICHIN_PORT", "8000")),
        log_level=env.get("ANICHIN_LOG_LEVEL", "INFO").upper(),
    )


SETTINGS = load_settings()
