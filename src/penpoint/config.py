"""Configuration objects for the Penpoint Python client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.penpoint.ai/v1"
DEFAULT_USER_AGENT = "penpoint-python/0.1.0"
DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT_MS  # milliseconds, non-positive means the default
    max_retries: int = 3
    backoff_seconds: float = 1.0
    max_backoff: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        max_backoff = os.environ.get("PENPOINT_MAX_BACKOFF")
        return cls(
            api_key=os.environ.get("PENPOINT_API_KEY", ""),
            base_url=os.environ.get("PENPOINT_BASE_URL", DEFAULT_BASE_URL),
            timeout=int(os.environ.get("PENPOINT_TIMEOUT_MS", "30000")),
            max_retries=int(os.environ.get("PENPOINT_MAX_RETRIES", "3")),
            max_backoff=float(max_backoff) if max_backoff else None,
            user_agent=os.environ.get("PENPOINT_USER_AGENT", DEFAULT_USER_AGENT),
        )


__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_MS", "DEFAULT_USER_AGENT"]
