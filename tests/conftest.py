"""Shared fixtures: an ApiClient wired to an in-memory httpx transport."""

import json

import httpx
import pytest

from animoto_api import ApiClient
from animoto_api.http import HttpxTransport, RetryPolicy

KEY = "k"
SECRET = "s"
HOST = "https://example.test"


class RecordingApi:
    """Stands in for the Animoto API behind ``httpx.MockTransport``.

    Records every request and retry policy it sees and answers with the
    queued responses in order.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.retry_policies: list[RetryPolicy | None] = []
        self._responses: list[httpx.Response | Exception] = []

    def respond(self, status_code: int, body: dict | str | None = None) -> None:
        if isinstance(body, dict):
            body = json.dumps(body)
        self._responses.append(httpx.Response(status_code, text=body or ""))

    def fail(self, exc: Exception) -> None:
        self._responses.append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def transport_factory(self, retry_policy: RetryPolicy | None) -> httpx.BaseTransport:
        self.retry_policies.append(retry_policy)
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api() -> RecordingApi:
    return RecordingApi()


@pytest.fixture
def transport(api: RecordingApi) -> HttpxTransport:
    return HttpxTransport(transport_factory=api.transport_factory)


@pytest.fixture
def api_client(transport: HttpxTransport) -> ApiClient:
    return ApiClient(KEY, SECRET, host=HOST, transport=transport)
