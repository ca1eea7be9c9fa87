"""File management endpoints."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Union

from ..errors import PenpointValidationError
from ..http_client import HttpClient
from ..types import File, FileList
from .base import parse_response

FileInput = Union[bytes, bytearray, str, os.PathLike, BinaryIO]


def _read_file(file: FileInput) -> bytes:
    if isinstance(file, (bytes, bytearray)):
        return bytes(file)
    if isinstance(file, (str, os.PathLike)):
        path = Path(file)
        if not path.is_file():
            raise PenpointValidationError(f"File not found: {path}")
        return path.read_bytes()
    if hasattr(file, "read"):
        content = file.read()
        if isinstance(content, (bytes, bytearray)):
            return bytes(content)
        raise PenpointValidationError("File object must be opened in binary mode")
    raise PenpointValidationError("Invalid file type")


class FilesResource:
    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def list(self, limit: Optional[int] = None, offset: Optional[int] = None) -> FileList:
        """List files with pagination."""
        response = await self._client.get("/files", query={"limit": limit, "offset": offset})
        return parse_response(FileList, response)

    async def upload(self, file: FileInput, filename: str, summary: Optional[str] = None) -> File:
        """
        Upload a document as multipart form data.

        ``file`` may be raw bytes, a filesystem path or a binary file object.
        """
        if not filename:
            raise PenpointValidationError("Filename is required")
        content = _read_file(file)

        data: Dict[str, Any] = {}
        if summary:
            data["summary"] = summary

        response = await self._client.post("/files", files={"file": (filename, content)}, data=data or None)
        return parse_response(File, response)

    async def update(self, file_id: int, summary: str, expiration_date: Optional[str] = None) -> File:
        """Update file metadata."""
        if not summary:
            raise PenpointValidationError("Summary is required")

        body: Dict[str, str] = {"summary": summary}
        if expiration_date:
            body["expirationDate"] = expiration_date

        response = await self._client.put(
            f"/files/{file_id}",
            json.dumps(body),
            headers={"Content-Type": "application/json"},
        )
        return parse_response(File, response)

    async def delete(self, file_id: int) -> bool:
        await self._client.delete(f"/files/{file_id}")
        return True

    async def get(self, file_id: int) -> File:
        response = await self._client.get(f"/files/{file_id}")
        return parse_response(File, response)


__all__ = ["FilesResource", "FileInput"]
