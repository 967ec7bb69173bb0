"""Animoto API client.

Submits directing, rendering and combined directing-and-rendering jobs to
the Animoto API and reloads the resources they produce. Failures surface
as :class:`HttpError`, :class:`HttpExpectationError` or
:class:`ContractError`.
"""

__version__ = "0.1.0"

from .client import DEFAULT_HOST, ApiClient  # noqa: E402
from .errors import (  # noqa: E402
    ApiError,
    ContractError,
    HttpError,
    HttpExpectationError,
)
from .http import RequestOptions, RetryPolicy  # noqa: E402
from .resources import (  # noqa: E402
    DirectingAndRenderingJob,
    DirectingJob,
    DirectingManifest,
    HttpCallbackFormat,
    RenderingJob,
    RenderingManifest,
    Storyboard,
    Video,
)

__all__ = [
    "DEFAULT_HOST",
    "ApiClient",
    "ApiError",
    "ContractError",
    "DirectingAndRenderingJob",
    "DirectingJob",
    "DirectingManifest",
    "HttpCallbackFormat",
    "HttpError",
    "HttpExpectationError",
    "RenderingJob",
    "RenderingManifest",
    "RequestOptions",
    "RetryPolicy",
    "Storyboard",
    "Video",
    "__version__",
]
