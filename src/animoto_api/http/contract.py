"""Status-code contracts for API operations.

Every operation expects one status code: 201 for job submissions and 200
for reloads. :class:`ResourceContract` executes the exchange and sorts any
failure into exactly one of :class:`~animoto_api.errors.HttpError`,
:class:`~animoto_api.errors.HttpExpectationError` or
:class:`~animoto_api.errors.ContractError`.
"""

import json
from dataclasses import dataclass
from http import HTTPStatus

import httpx
import structlog

from ..errors import ContractError, HttpError, HttpExpectationError
from ..resources.base import Resource, ResourceState
from .request import PreparedRequest
from .transport import Transport

logger = structlog.get_logger(__name__)


def extract_api_errors(body: str) -> list[str]:
    """Pull error messages out of an API error envelope.

    The API reports failures as
    ``{"response": {"status": {"errors": [{"message": ...}]}}}``. Bodies in
    any other shape yield an empty list.
    """
    try:
        document = json.loads(body)
        errors = document["response"]["status"]["errors"]
    except (ValueError, KeyError, TypeError):
        return []
    if not isinstance(errors, list):
        return []
    messages = []
    for error in errors:
        if isinstance(error, dict):
            messages.append(str(error.get("message", error)))
        else:
            messages.append(str(error))
    return messages


@dataclass(frozen=True)
class ResourceContract:
    """Expected status code and media types of one operation."""

    expected_status: int
    accept: str
    content_type: str | None = None

    @classmethod
    def for_submit(cls, resource: Resource) -> "ResourceContract":
        return cls(
            expected_status=HTTPStatus.CREATED,
            accept=resource.accept,
            content_type=resource.content_type,
        )

    @classmethod
    def for_reload(cls, resource: Resource) -> "ResourceContract":
        return cls(expected_status=HTTPStatus.OK, accept=resource.accept)

    def request_headers(self) -> dict[str, str]:
        """Content negotiation headers for the request."""
        headers = {}
        if self.content_type is not None:
            headers["Content-Type"] = self.content_type
        headers["Accept"] = self.accept
        return headers

    def exchange(
        self,
        transport: Transport,
        prepared: PreparedRequest,
    ) -> httpx.Response:
        """Execute the request.

        Raises:
            HttpError: If the exchange does not complete.
        """
        try:
            return transport.execute(prepared)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.exception(
                "API request failed",
                method=prepared.method,
                url=prepared.url,
            )
            msg = f"{prepared.method} {prepared.url} failed: {exc}"
            raise HttpError(msg) from exc

    def validate(self, response: httpx.Response, resource: Resource) -> ResourceState:
        """Check the response against this contract and parse its body.

        The resource is not modified.

        Returns:
            Parsed resource state, ready for hydration.

        Raises:
            HttpExpectationError: If the status code is not the expected one.
            ContractError: If the body does not match the resource schema.
        """
        body = response.text
        if response.status_code != self.expected_status:
            api_errors = extract_api_errors(body)
            logger.warning(
                "Unexpected API response status",
                expected_status=int(self.expected_status),
                status_code=response.status_code,
                api_errors=api_errors,
            )
            raise HttpExpectationError(
                status_code=response.status_code,
                body=body,
                expected_status=int(self.expected_status),
                api_errors=api_errors,
            )

        try:
            return resource.parse_body(body)
        except ValueError as exc:
            logger.warning(
                "API response violates resource schema",
                resource=type(resource).__name__,
                error=str(exc),
            )
            msg = f"Invalid {type(resource).__name__} response body: {exc}"
            raise ContractError(msg, body=body) from exc
