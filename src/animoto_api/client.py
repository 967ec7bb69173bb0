"""Animoto API client façade.

Owns the credentials and API host and exposes the public operations:
:meth:`ApiClient.direct`, :meth:`ApiClient.render`,
:meth:`ApiClient.direct_and_render`, :meth:`ApiClient.submit` and
:meth:`ApiClient.reload`. Each call performs exactly one HTTP exchange.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeVar

import structlog

from . import __version__
from .credentials import Credentials
from .http.request import Interceptor, RequestBuilder, RequestOptions, RetryPolicy
from .http.transport import HttpxTransport, Transport
from .metrics import RequestMetrics
from .resources.base import Resource
from .resources.jobs import DirectingAndRenderingJob, DirectingJob, Job, RenderingJob
from .resources.manifests import DirectingManifest, HttpCallbackFormat, RenderingManifest
from .submitter import JobOptions, JobSubmitter

if TYPE_CHECKING:
    from .config import ClientConfig

logger = structlog.get_logger(__name__)

DEFAULT_HOST = "https://api2.animoto.com"

J = TypeVar("J", bound=Job)
R = TypeVar("R", bound=Resource)


class ApiClient:
    """Client for the Animoto API.

    Holds only immutable state (credentials and host); transport clients
    and header maps are built per call, so one instance can be shared as
    long as the transport is thread-safe.
    """

    def __init__(
        self,
        key: str,
        secret: str,
        host: str = DEFAULT_HOST,
        transport: Transport | None = None,
        metrics: RequestMetrics | None = None,
    ):
        """Initialize the client.

        Args:
            key: Animoto API key.
            secret: Animoto API secret.
            host: API base URL (default: https://api2.animoto.com).
            transport: Transport executing the requests (default:
                HttpxTransport).
            metrics: Optional Prometheus instrumentation.

        Raises:
            ValueError: If key, secret or host is empty.
        """
        if not host:
            msg = "host cannot be empty"
            raise ValueError(msg)
        self._credentials = Credentials(key, secret)
        self._host = host.rstrip("/")
        self._transport = transport or HttpxTransport()
        self._metrics = metrics

    @classmethod
    def from_config(
        cls,
        config: "ClientConfig",
        metrics: RequestMetrics | None = None,
    ) -> "ApiClient":
        """Create a client from validated configuration."""
        return cls(
            key=config.key,
            secret=config.secret,
            host=config.host,
            transport=HttpxTransport(timeout=config.timeout),
            metrics=metrics,
        )

    @property
    def key(self) -> str:
        return self._credentials.key

    @property
    def host(self) -> str:
        return self._host

    @property
    def version(self) -> str:
        return __version__

    @property
    def user_agent(self) -> str:
        return f"Animoto Python API Client - {self.version}"

    def _submitter(self) -> JobSubmitter:
        return JobSubmitter(
            host=self._host,
            builder=RequestBuilder(self._credentials),
            transport=self._transport,
            user_agent=self.user_agent,
            metrics=self._metrics,
        )

    def direct(
        self,
        directing_manifest: DirectingManifest,
        *,
        http_callback: str | None = None,
        http_callback_format: HttpCallbackFormat | None = None,
        retry_policy: RetryPolicy | None = None,
        interceptors: Sequence[Interceptor] | None = None,
    ) -> DirectingJob:
        """Create a directing job.

        Args:
            directing_manifest: The manifest to direct.
            http_callback: URL the API calls back with status updates.
            http_callback_format: Payload format of the callback.
            retry_policy: Retry policy for this request.
            interceptors: Callables run in order on the outgoing request.

        Returns:
            The submitted DirectingJob.

        Raises:
            HttpError: If the exchange does not complete.
            HttpExpectationError: If the API does not answer 201.
            ContractError: If the response body is not a directing job.
        """
        return self.submit(
            DirectingJob(directing_manifest),
            http_callback=http_callback,
            http_callback_format=http_callback_format,
            retry_policy=retry_policy,
            interceptors=interceptors,
        )

    def render(
        self,
        rendering_manifest: RenderingManifest,
        *,
        http_callback: str | None = None,
        http_callback_format: HttpCallbackFormat | None = None,
        retry_policy: RetryPolicy | None = None,
        interceptors: Sequence[Interceptor] | None = None,
    ) -> RenderingJob:
        """Create a rendering job for an existing storyboard.

        Arguments and errors are as for :meth:`direct`.
        """
        return self.submit(
            RenderingJob(rendering_manifest),
            http_callback=http_callback,
            http_callback_format=http_callback_format,
            retry_policy=retry_policy,
            interceptors=interceptors,
        )

    def direct_and_render(
        self,
        directing_manifest: DirectingManifest,
        rendering_manifest: RenderingManifest,
        *,
        http_callback: str | None = None,
        http_callback_format: HttpCallbackFormat | None = None,
        retry_policy: RetryPolicy | None = None,
        interceptors: Sequence[Interceptor] | None = None,
    ) -> DirectingAndRenderingJob:
        """Create a job that directs and then renders in one go.

        The storyboard comes from the directing half of the job, so
        ``rendering_manifest.storyboard_url`` is cleared on the caller's
        manifest before the request is built.

        Arguments and errors are as for :meth:`direct`.
        """
        return self.submit(
            DirectingAndRenderingJob(directing_manifest, rendering_manifest),
            http_callback=http_callback,
            http_callback_format=http_callback_format,
            retry_policy=retry_policy,
            interceptors=interceptors,
        )

    def submit(
        self,
        job: J,
        *,
        http_callback: str | None = None,
        http_callback_format: HttpCallbackFormat | None = None,
        retry_policy: RetryPolicy | None = None,
        interceptors: Sequence[Interceptor] | None = None,
    ) -> J:
        """Submit an already constructed job.

        Callback arguments left as None keep whatever the job already has
        configured.
        """
        options = JobOptions(
            http_callback=http_callback,
            http_callback_format=http_callback_format,
            request=RequestOptions.of(retry_policy, interceptors),
        )
        self._submitter().submit(job, options)
        return job

    def reload(
        self,
        resource: R,
        *,
        retry_policy: RetryPolicy | None = None,
        interceptors: Sequence[Interceptor] | None = None,
    ) -> R:
        """Refresh a resource with its latest state from the API.

        Raises:
            ValueError: If the resource has no location.
            HttpError: If the exchange does not complete.
            HttpExpectationError: If the API does not answer 200.
            ContractError: If the response body does not describe the resource.
        """
        self._submitter().reload(
            resource,
            RequestOptions.of(retry_policy, interceptors),
        )
        return resource
