"""Async HTTP transport with retry, timeout and error normalization."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple, Union

import httpx

from .config import DEFAULT_TIMEOUT_MS
from .errors import PenpointApiError, PenpointNetworkError, PenpointTimeoutError, PenpointValidationError
from .types import ApiResponse, QueryValue, RequestOptions

logger = logging.getLogger("penpoint.http")

Sleep = Callable[[float], Awaitable[None]]


def _coerce(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(query: Optional[Mapping[str, QueryValue]]) -> List[Tuple[str, str]]:
    """Return query pairs for every entry whose value is not None."""
    if not query:
        return []
    return [(key, _coerce(value)) for key, value in query.items() if value is not None]


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpClient:
    """
    Issues one logical call per ``request`` with bounded retries.

    5xx responses and connection-level failures are retried with exponential
    backoff (``backoff_seconds * 2**attempt``). A timeout ends the call
    immediately. 4xx responses are never retried.
    """

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Mapping[str, str]] = None,
        default_timeout: int = DEFAULT_TIMEOUT_MS,
        max_retries: int = 3,
        *,
        backoff_seconds: float = 1.0,
        max_backoff: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._default_headers: Dict[str, str] = dict(default_headers or {})
        self._default_timeout = default_timeout if default_timeout > 0 else DEFAULT_TIMEOUT_MS
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._max_backoff = max_backoff
        self._sleep = sleep or asyncio.sleep
        self._client = httpx.AsyncClient(transport=transport, follow_redirects=True)

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def default_headers(self) -> Dict[str, str]:
        return dict(self._default_headers)

    @property
    def default_timeout(self) -> int:
        return self._default_timeout

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def build_url(self, endpoint: str) -> str:
        if not endpoint:
            raise PenpointValidationError("Endpoint is required")
        return f"{self._base_url}/{endpoint.lstrip('/')}"

    def merge_headers(self, headers: Optional[Mapping[str, str]] = None) -> httpx.Headers:
        merged = httpx.Headers(self._default_headers)
        for key, value in (headers or {}).items():
            merged[key] = value
        return merged

    def backoff_delay(self, attempt: int) -> float:
        delay = self._backoff_seconds * (2 ** attempt)
        if self._max_backoff is not None:
            delay = min(delay, self._max_backoff)
        return delay

    async def _wait_before_retry(self, request: httpx.Request, attempt: int, reason: str) -> None:
        delay = self.backoff_delay(attempt)
        logger.warning(
            "Retrying %s %s reason=%s attempt=%d delay=%.1fs",
            request.method,
            request.url,
            reason,
            attempt + 1,
            delay,
        )
        await self._sleep(delay)

    async def _send_with_retry(self, request: httpx.Request, timeout_ms: int) -> httpx.Response:
        attempt = 0
        while True:
            try:
                response = await asyncio.wait_for(self._client.send(request), timeout=timeout_ms / 1000)
            except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
                raise PenpointTimeoutError(timeout_ms) from exc
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise PenpointNetworkError(f"Request to {request.url} failed: {exc}", cause=exc) from exc
                await self._wait_before_retry(request, attempt, type(exc).__name__)
                attempt += 1
                continue

            if response.is_success or response.status_code < 500 or attempt >= self._max_retries:
                return response
            await self._wait_before_retry(request, attempt, f"status={response.status_code}")
            attempt += 1

    def _api_error(self, response: httpx.Response) -> PenpointApiError:
        message = f"HTTP {response.status_code}: {response.reason_phrase}"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        logger.debug("API error status=%s body=%s", response.status_code, response.text)
        return PenpointApiError(message, status=response.status_code, response=body)

    async def request(self, endpoint: str, options: Optional[RequestOptions] = None) -> ApiResponse[Any]:
        options = options or RequestOptions()
        url = self.build_url(endpoint)
        timeout_ms = options.timeout if options.timeout and options.timeout > 0 else self._default_timeout
        request = self._client.build_request(
            options.method or "GET",
            url,
            params=build_query(options.query),
            content=options.body,
            files=options.files,
            data=options.data,
            headers=self.merge_headers(options.headers),
            timeout=timeout_ms / 1000,
        )

        response = await self._send_with_retry(request, timeout_ms)
        if not response.is_success:
            raise self._api_error(response)

        return ApiResponse(
            data=_decode_body(response),
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
        )

    async def get(
        self,
        endpoint: str,
        *,
        query: Optional[Mapping[str, QueryValue]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> ApiResponse[Any]:
        return await self.request(endpoint, RequestOptions(method="GET", query=query, headers=headers, timeout=timeout))

    async def post(
        self,
        endpoint: str,
        body: Optional[Union[str, bytes]] = None,
        *,
        files: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> ApiResponse[Any]:
        return await self.request(
            endpoint,
            RequestOptions(method="POST", body=body, files=files, data=data, headers=headers, timeout=timeout),
        )

    async def put(
        self,
        endpoint: str,
        body: Optional[Union[str, bytes]] = None,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> ApiResponse[Any]:
        return await self.request(endpoint, RequestOptions(method="PUT", body=body, headers=headers, timeout=timeout))

    async def delete(
        self,
        endpoint: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> ApiResponse[Any]:
        return await self.request(endpoint, RequestOptions(method="DELETE", headers=headers, timeout=timeout))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["HttpClient", "build_query"]
