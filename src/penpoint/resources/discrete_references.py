"""Discrete reference search endpoints."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..errors import PenpointValidationError
from ..http_client import HttpClient
from ..types import DiscreteReferenceResponse
from .base import parse_response


class DiscreteReferencesResource:
    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def basic(
        self, file_id: int, prompt: str, markup_file: bool, markup_color: Optional[str] = None
    ) -> DiscreteReferenceResponse:
        return await self._search("/discrete-references/basic", file_id, prompt, markup_file, markup_color)

    async def standard(
        self, file_id: int, prompt: str, markup_file: bool, markup_color: Optional[str] = None
    ) -> DiscreteReferenceResponse:
        return await self._search("/discrete-references/standard", file_id, prompt, markup_file, markup_color)

    async def advanced(
        self, file_id: int, prompt: str, markup_file: bool, markup_color: Optional[str] = None
    ) -> DiscreteReferenceResponse:
        return await self._search("/discrete-references/advanced", file_id, prompt, markup_file, markup_color)

    async def _search(
        self,
        endpoint: str,
        file_id: int,
        prompt: str,
        markup_file: bool,
        markup_color: Optional[str],
    ) -> DiscreteReferenceResponse:
        if not prompt:
            raise PenpointValidationError("Prompt is required")

        body: Dict[str, Any] = {
            "fileId": file_id,
            "prompt": prompt,
            "markupFile": markup_file,
        }
        if markup_color:
            body["markupColor"] = markup_color

        response = await self._client.post(
            endpoint,
            json.dumps(body),
            headers={"Content-Type": "application/json"},
        )
        return parse_response(DiscreteReferenceResponse, response)


__all__ = ["DiscreteReferencesResource"]
