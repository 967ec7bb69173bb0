"""Request construction.

Turns a target URL, method, headers and optional body into a
:class:`PreparedRequest` that carries everything the transport needs for a
single exchange: the ``httpx.Request`` itself, the Basic-Auth flow and any
per-call retry policy and interceptors.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

import httpx
import structlog

from ..credentials import Credentials

logger = structlog.get_logger(__name__)

Interceptor: TypeAlias = Callable[[httpx.Request], None]


@dataclass(frozen=True)
class RetryPolicy:
    """Connection retry policy applied by the transport.

    Maps onto httpx's transport-level ``retries``, which retries failed
    connection attempts (``ConnectError`` / ``ConnectTimeout``).
    """

    retries: int = 0

    def __post_init__(self):
        if self.retries < 0:
            msg = "retries cannot be negative"
            raise ValueError(msg)


@dataclass(frozen=True)
class RequestOptions:
    """Per-call transport configuration.

    Attributes:
        retry_policy: Retry policy to register, or None for the transport
            default.
        interceptors: Callables run in order on each outgoing request.
        timeout: Request timeout in seconds, or None for the transport
            default.
    """

    retry_policy: RetryPolicy | None = None
    interceptors: tuple[Interceptor, ...] = ()
    timeout: float | None = None

    @classmethod
    def of(
        cls,
        retry_policy: RetryPolicy | None = None,
        interceptors: Sequence[Interceptor] | None = None,
        timeout: float | None = None,
    ) -> "RequestOptions":
        """Build options from optional call arguments."""
        return cls(
            retry_policy=retry_policy,
            interceptors=tuple(interceptors or ()),
            timeout=timeout,
        )


@dataclass
class PreparedRequest:
    """A request ready to be handed to a transport."""

    request: httpx.Request
    auth: httpx.Auth
    retry_policy: RetryPolicy | None = None
    interceptors: tuple[Interceptor, ...] = field(default_factory=tuple)
    timeout: float | None = None

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def url(self) -> str:
        return str(self.request.url)


class RequestBuilder:
    """Builds authenticated requests for a fixed set of credentials."""

    def __init__(self, credentials: Credentials):
        self._credentials = credentials

    def build(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: str | None = None,
        options: RequestOptions | None = None,
    ) -> PreparedRequest:
        """Build a transport-ready request.

        Headers are attached in iteration order; a repeated name (compared
        case-insensitively) replaces the earlier value. Header values are
        not checked beyond the ASCII encoding httpx applies.

        Args:
            method: HTTP method.
            url: Absolute target URL.
            headers: Header name to value mapping.
            body: Optional request body.
            options: Optional retry policy, interceptors and timeout.

        Returns:
            PreparedRequest with Basic-Auth attached.
        """
        options = options or RequestOptions()

        merged: dict[str, tuple[str, str]] = {}
        for name, value in headers.items():
            merged[name.lower()] = (name, value)

        # Headers built from pairs are ASCII-encoded; bad values raise here.
        request = httpx.Request(
            method,
            url,
            headers=httpx.Headers(list(merged.values())),
            content=body,
        )
        logger.debug(
            "Built API request",
            method=method,
            url=url,
            interceptors=len(options.interceptors),
            retry_policy=options.retry_policy,
        )
        return PreparedRequest(
            request=request,
            auth=self._credentials.basic_auth(),
            retry_policy=options.retry_policy,
            interceptors=options.interceptors,
            timeout=options.timeout,
        )
