"""Python client for the Penpoint API."""

from __future__ import annotations

from typing import Optional

import httpx

from .config import ClientConfig
from .errors import PenpointValidationError
from .http_client import HttpClient, Sleep
from .resources import DiscreteReferencesResource, FilesResource


class PenpointClient:
    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[Sleep] = None,
    ) -> None:
        if not config.api_key:
            raise PenpointValidationError("API key is required")
        self._config = config
        self._http = HttpClient(
            config.base_url,
            {
                "x-api-key": config.api_key,
                "User-Agent": config.user_agent,
            },
            default_timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_seconds=config.backoff_seconds,
            max_backoff=config.max_backoff,
            transport=transport,
            sleep=sleep,
        )
        self.files = FilesResource(self._http)
        self.discrete_references = DiscreteReferencesResource(self._http)

    @classmethod
    def from_env(cls, **kwargs) -> "PenpointClient":
        return cls(ClientConfig.from_env(), **kwargs)

    async def __aenter__(self) -> "PenpointClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def http_client(self) -> HttpClient:
        """The underlying transport, for calling endpoints without a resource wrapper."""
        return self._http

    async def close(self) -> None:
        await self._http.close()


__all__ = ["PenpointClient"]
