from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from penpoint.client import PenpointClient
from penpoint.config import ClientConfig

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def sleeps() -> List[float]:
    return []


@pytest.fixture()
def fake_sleep(sleeps: List[float]):
    async def _sleep(delay: float) -> None:
        sleeps.append(delay)

    return _sleep


@pytest.fixture()
def make_client(fake_sleep):
    def _make(handler: Handler, **overrides) -> PenpointClient:
        options = dict(api_key="test-key", base_url="https://api.example.com/v1")
        options.update(overrides)
        return PenpointClient(ClientConfig(**options), transport=httpx.MockTransport(handler), sleep=fake_sleep)

    return _make
