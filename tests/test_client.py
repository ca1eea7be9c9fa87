from __future__ import annotations

import httpx
import pytest

from penpoint import PenpointClient
from penpoint.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ClientConfig
from penpoint.errors import ErrorKind, PenpointValidationError


def test_empty_api_key_is_rejected() -> None:
    with pytest.raises(PenpointValidationError, match="API key is required") as excinfo:
        PenpointClient(ClientConfig(api_key=""))
    assert excinfo.value.kind is ErrorKind.VALIDATION


@pytest.mark.asyncio
async def test_defaults_are_applied() -> None:
    async with PenpointClient(ClientConfig(api_key="test-key")) as client:
        http = client.http_client
        assert http.base_url == DEFAULT_BASE_URL
        assert http.default_timeout == 30000
        assert http.max_retries == 3
        assert http.default_headers == {"x-api-key": "test-key", "User-Agent": DEFAULT_USER_AGENT}
        assert client.files is not None
        assert client.discrete_references is not None


@pytest.mark.asyncio
async def test_custom_configuration() -> None:
    cfg = ClientConfig(
        api_key="test-key",
        base_url="https://custom.api.com/v2/",
        timeout=60000,
        max_retries=0,
        user_agent="custom-user-agent",
    )
    async with PenpointClient(cfg) as client:
        http = client.http_client
        assert http.base_url == "https://custom.api.com/v2"
        assert http.default_timeout == 60000
        assert http.max_retries == 0
        assert http.default_headers["User-Agent"] == "custom-user-agent"


@pytest.mark.asyncio
async def test_default_headers_sent(make_client) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        seen["url"] = str(request.url)
        return httpx.Response(200, json={"object": "list", "has_more": False, "data": []})

    async with make_client(handler) as client:
        await client.files.list()

    assert seen["headers"]["x-api-key"] == "test-key"
    assert seen["headers"]["user-agent"] == DEFAULT_USER_AGENT
    assert seen["url"] == "https://api.example.com/v1/files"


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PENPOINT_API_KEY", "env-key")
    monkeypatch.setenv("PENPOINT_BASE_URL", "https://staging.penpoint.ai/v1")
    monkeypatch.setenv("PENPOINT_TIMEOUT_MS", "5000")
    monkeypatch.setenv("PENPOINT_MAX_RETRIES", "1")
    monkeypatch.setenv("PENPOINT_MAX_BACKOFF", "8")
    monkeypatch.delenv("PENPOINT_USER_AGENT", raising=False)

    cfg = ClientConfig.from_env()

    assert cfg.api_key == "env-key"
    assert cfg.base_url == "https://staging.penpoint.ai/v1"
    assert cfg.timeout == 5000
    assert cfg.max_retries == 1
    assert cfg.max_backoff == 8.0
    assert cfg.user_agent == DEFAULT_USER_AGENT


def test_from_env_without_key_fails(monkeypatch) -> None:
    monkeypatch.delenv("PENPOINT_API_KEY", raising=False)
    with pytest.raises(PenpointValidationError):
        PenpointClient.from_env()
