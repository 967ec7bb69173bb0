"""Job submission and resource reloading.

Both operations follow the same template: build headers and body through
the resource's own capability, send one request, check the response against
the operation's contract and only then hydrate the resource.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import structlog

from . import metrics as metrics_module
from .errors import ContractError, HttpError, HttpExpectationError
from .http.contract import ResourceContract
from .http.request import PreparedRequest, RequestBuilder, RequestOptions
from .http.transport import Transport
from .resources.base import Resource
from .resources.jobs import DirectingAndRenderingJob, Job
from .resources.manifests import HttpCallbackFormat

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class JobOptions:
    """Optional per-submission settings.

    ``None`` callback fields leave the job's current callback configuration
    untouched rather than clearing it.
    """

    http_callback: str | None = None
    http_callback_format: HttpCallbackFormat | None = None
    request: RequestOptions = field(default_factory=RequestOptions)


class JobSubmitter:
    """Submits jobs and reloads resources against one API host."""

    def __init__(
        self,
        host: str,
        builder: RequestBuilder,
        transport: Transport,
        user_agent: str,
        metrics: metrics_module.RequestMetrics | None = None,
    ):
        self._host = host.rstrip("/")
        self._builder = builder
        self._transport = transport
        self._user_agent = user_agent
        self._metrics = metrics

    def job_url(self, context: str) -> str:
        return f"{self._host}/jobs/{context}"

    def submit(self, job: Job, options: JobOptions | None = None) -> Job:
        """POST a job and hydrate it from the 201 response.

        A combined directing-and-rendering job has its rendering manifest's
        ``storyboard_url`` cleared first.

        Args:
            job: Job to submit; its manifests must be set.
            options: Callback settings and request options.

        Returns:
            The same job, hydrated with the server-assigned fields.

        Raises:
            HttpError: If the exchange does not complete.
            HttpExpectationError: If the API does not answer 201.
            ContractError: If the 201 body does not describe the job.
        """
        options = options or JobOptions()
        if (
            isinstance(job, DirectingAndRenderingJob)
            and job.rendering_manifest is not None
        ):
            # The combined job produces its own storyboard.
            job.rendering_manifest.storyboard_url = None
        if options.http_callback is not None:
            job.http_callback = options.http_callback
        if options.http_callback_format is not None:
            job.http_callback_format = options.http_callback_format

        contract = ResourceContract.for_submit(job)
        body = job.to_wire_body()
        headers = contract.request_headers()
        headers["User-Agent"] = self._user_agent
        url = self.job_url(job.context)

        def build() -> PreparedRequest:
            return self._builder.build(
                "POST",
                url,
                headers=headers,
                body=body,
                options=options.request,
            )

        self._perform(job.context, job, contract, build)
        return job

    def reload(
        self,
        resource: Resource,
        options: RequestOptions | None = None,
    ) -> Resource:
        """GET a resource's location and hydrate it from the 200 response.

        Raises:
            ValueError: If the resource has no location yet.
            HttpError: If the exchange does not complete.
            HttpExpectationError: If the API does not answer 200.
            ContractError: If the 200 body does not describe the resource.
        """
        if not resource.location:
            msg = f"{type(resource).__name__} has no location to reload from"
            raise ValueError(msg)

        contract = ResourceContract.for_reload(resource)
        location = resource.location

        def build() -> PreparedRequest:
            return self._builder.build(
                "GET",
                location,
                headers=contract.request_headers(),
                options=options,
            )

        self._perform("reload", resource, contract, build)
        return resource

    def _perform(
        self,
        operation: str,
        resource: Resource,
        contract: ResourceContract,
        build: Callable[[], PreparedRequest],
    ) -> None:
        start_time = time.time()
        outcome: str | None = None
        try:
            try:
                prepared = build()
            except (httpx.InvalidURL, UnicodeEncodeError) as exc:
                msg = f"Could not build {operation} request: {exc}"
                raise HttpError(msg) from exc

            logger.debug(
                "Making API request",
                operation=operation,
                method=prepared.method,
                url=prepared.url,
            )
            response = contract.exchange(self._transport, prepared)
            state = contract.validate(response, resource)
            outcome = metrics_module.SUCCESS
        except HttpError:
            outcome = metrics_module.HTTP_ERROR
            raise
        except HttpExpectationError:
            outcome = metrics_module.EXPECTATION_ERROR
            raise
        except ContractError:
            outcome = metrics_module.CONTRACT_ERROR
            raise
        finally:
            duration = time.time() - start_time
            if self._metrics is not None and outcome is not None:
                self._metrics.observe(operation, outcome, duration)

        resource.hydrate(state)
        logger.debug(
            "API request completed",
            operation=operation,
            resource_id=getattr(resource, "id", None),
            duration_seconds=round(duration, 3),
        )
