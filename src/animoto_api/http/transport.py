"""HTTP transports.

A transport executes a :class:`~animoto_api.http.request.PreparedRequest`
and returns the raw ``httpx.Response``. The default implementation builds a
fresh ``httpx.Client`` per call so that no connection state is shared
between calls; pooling, if wanted, belongs in a custom transport.
"""

import time
from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

import httpx
import structlog

from .request import PreparedRequest, RetryPolicy

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

TransportFactory: TypeAlias = Callable[[RetryPolicy | None], httpx.BaseTransport]


@runtime_checkable
class Transport(Protocol):
    """Executes prepared requests."""

    def execute(self, prepared: PreparedRequest) -> httpx.Response:
        """Send the request and return the response with its body read.

        Raises:
            httpx.HTTPError: If the exchange does not complete.
        """
        ...


def default_transport_factory(retry_policy: RetryPolicy | None) -> httpx.BaseTransport:
    """Create the network transport, registering the retry policy if given."""
    if retry_policy is None:
        return httpx.HTTPTransport()
    return httpx.HTTPTransport(retries=retry_policy.retries)


class HttpxTransport:
    """Transport backed by a per-call ``httpx.Client``.

    Basic-Auth is configured on the client, so it is sent with every
    request the client makes regardless of host. Interceptors are
    registered as ``request`` event hooks in the order given.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport_factory: TransportFactory | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Default request timeout in seconds.
            transport_factory: Builds the underlying httpx transport for a
                retry policy. Tests inject ``httpx.MockTransport`` here.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        self._timeout = timeout
        self._transport_factory = transport_factory or default_transport_factory

    def execute(self, prepared: PreparedRequest) -> httpx.Response:
        start_time = time.time()
        timeout = prepared.timeout if prepared.timeout is not None else self._timeout
        # Client timeouts only reach requests built by the client itself.
        prepared.request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()

        with httpx.Client(
            auth=prepared.auth,
            timeout=timeout,
            transport=self._transport_factory(prepared.retry_policy),
            event_hooks={"request": list(prepared.interceptors), "response": []},
        ) as client:
            response = client.send(prepared.request)

        logger.debug(
            "HTTP exchange completed",
            method=prepared.method,
            url=prepared.url,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        return response
