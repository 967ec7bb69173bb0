"""HTTP layer: request construction, transports and response contracts."""

from .contract import ResourceContract, extract_api_errors
from .request import (
    Interceptor,
    PreparedRequest,
    RequestBuilder,
    RequestOptions,
    RetryPolicy,
)
from .transport import DEFAULT_TIMEOUT, HttpxTransport, Transport

__all__ = [
    "DEFAULT_TIMEOUT",
    "HttpxTransport",
    "Interceptor",
    "PreparedRequest",
    "RequestBuilder",
    "RequestOptions",
    "ResourceContract",
    "RetryPolicy",
    "Transport",
    "extract_api_errors",
]
