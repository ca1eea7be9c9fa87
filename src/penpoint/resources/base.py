"""Shared helpers for resource wrappers."""

from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import PenpointApiError
from ..types import ApiResponse

M = TypeVar("M", bound=BaseModel)


def parse_response(model: Type[M], response: ApiResponse[Any]) -> M:
    """Validate a 2xx payload, raising PenpointApiError when its shape is unexpected."""
    try:
        return model.model_validate(response.data)
    except ValidationError as exc:
        raise PenpointApiError(
            f"Unexpected {model.__name__} payload: {exc.error_count()} validation error(s)",
            status=response.status,
            response=response.data,
        ) from exc


__all__ = ["parse_response"]
