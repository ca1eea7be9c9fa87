"""Penpoint Python client."""

from .client import PenpointClient
from .config import ClientConfig
from .errors import (
    ErrorKind,
    PenpointApiError,
    PenpointError,
    PenpointNetworkError,
    PenpointTimeoutError,
    PenpointValidationError,
)
from .http_client import HttpClient
from .resources import DiscreteReferencesResource, FilesResource
from .types import (
    ApiResponse,
    DiscreteReferenceResponse,
    File,
    FileList,
    ReferenceMetadata,
    ReferencePart,
    RequestOptions,
)

__version__ = "0.1.0"

__all__ = [
    "ApiResponse",
    "ClientConfig",
    "DiscreteReferenceResponse",
    "DiscreteReferencesResource",
    "ErrorKind",
    "File",
    "FileList",
    "FilesResource",
    "HttpClient",
    "PenpointApiError",
    "PenpointClient",
    "PenpointError",
    "PenpointNetworkError",
    "PenpointTimeoutError",
    "PenpointValidationError",
    "ReferenceMetadata",
    "ReferencePart",
    "RequestOptions",
]
