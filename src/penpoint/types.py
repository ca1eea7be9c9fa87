"""Request/response shapes and pydantic models for the Penpoint API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

QueryValue = Optional[Union[str, int, float, bool]]


@dataclass(frozen=True)
class RequestOptions:
    method: str = "GET"
    body: Optional[Union[str, bytes]] = None
    files: Optional[Mapping[str, Any]] = None
    data: Optional[Mapping[str, Any]] = None
    query: Optional[Mapping[str, QueryValue]] = None
    headers: Optional[Mapping[str, str]] = None
    timeout: Optional[int] = None  # milliseconds, overrides the client default


@dataclass
class ApiResponse(Generic[T]):
    data: T
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)


class ReferenceMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    page: Optional[int] = None
    x: Optional[float] = None
    y: Optional[float] = None
    w: Optional[float] = None
    h: Optional[float] = None
    labels: List[str] = Field(default_factory=list)


class ReferencePart(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    segment: str
    metadata: ReferenceMetadata
    document_id: int
    page_number: int
    chunk_number: int
    vector_distance: float
    text_distance: float
    hybrid_score: float


class References(BaseModel):
    model_config = ConfigDict(extra="allow")

    parts: List[ReferencePart] = Field(default_factory=list)


class DiscreteReferenceResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    refs: References


class File(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    created_at: str
    pages: Optional[int] = None
    summary: Optional[str] = None
    metadata: Optional[str] = None
    expires_at: Optional[str] = None
    storage_location: Optional[str] = None
    company_id: Optional[int] = None


class FileList(BaseModel):
    model_config = ConfigDict(extra="allow")

    object: str = "list"
    has_more: bool = False
    data: List[File] = Field(default_factory=list)


__all__ = [
    "ApiResponse",
    "DiscreteReferenceResponse",
    "File",
    "FileList",
    "QueryValue",
    "ReferenceMetadata",
    "ReferencePart",
    "References",
    "RequestOptions",
]
