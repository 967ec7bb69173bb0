"""Tests for HttpxTransport."""

import base64
from unittest.mock import patch

import httpx
import pytest

from animoto_api.credentials import Credentials
from animoto_api.http import request, transport

EXPECTED_AUTH = "Basic " + base64.b64encode(b"k:s").decode()


def _prepared(**kwargs) -> request.PreparedRequest:
    builder = request.RequestBuilder(Credentials("k", "s"))
    return builder.build(
        "GET",
        "https://anywhere.test/x",
        {},
        options=request.RequestOptions.of(**kwargs),
    )


def test_timeout_must_be_positive():
    with pytest.raises(ValueError, match="positive"):
        transport.HttpxTransport(timeout=0)


def test_execute_returns_read_response():
    """The response body is readable after the per-call client is closed."""
    http = transport.HttpxTransport(
        transport_factory=lambda _: httpx.MockTransport(
            lambda req: httpx.Response(200, text="hello"),
        ),
    )
    response = http.execute(_prepared())
    assert response.status_code == 200
    assert response.text == "hello"


def test_execute_sends_basic_auth_to_any_host():
    """Authorization is attached regardless of the target host."""
    seen = []

    def handler(req: httpx.Request) -> httpx.Response:
        seen.append(req.headers.get("Authorization"))
        return httpx.Response(200)

    http = transport.HttpxTransport(
        transport_factory=lambda _: httpx.MockTransport(handler),
    )
    http.execute(_prepared())
    assert seen == [EXPECTED_AUTH]


def test_execute_propagates_transport_errors():
    """httpx errors are raised unchanged; classification happens upstream."""

    def handler(req: httpx.Request) -> httpx.Response:
        msg = "timed out"
        raise httpx.ReadTimeout(msg, request=req)

    http = transport.HttpxTransport(
        transport_factory=lambda _: httpx.MockTransport(handler),
    )
    with pytest.raises(httpx.ReadTimeout):
        http.execute(_prepared())


@patch("animoto_api.http.transport.httpx.HTTPTransport")
def test_default_factory_registers_retry_policy(mock_transport):
    """The retry policy becomes httpx transport-level retries."""
    transport.default_transport_factory(request.RetryPolicy(retries=4))
    mock_transport.assert_called_once_with(retries=4)


@patch("animoto_api.http.transport.httpx.HTTPTransport")
def test_default_factory_without_policy_uses_httpx_default(mock_transport):
    transport.default_transport_factory(None)
    mock_transport.assert_called_once_with()


def test_httpx_transport_satisfies_protocol():
    assert isinstance(transport.HttpxTransport(), transport.Transport)


def test_execute_applies_timeout_to_request():
    """The per-call timeout overrides the transport default on the request."""
    seen = []

    def handler(req: httpx.Request) -> httpx.Response:
        seen.append(req.extensions["timeout"])
        return httpx.Response(200)

    http = transport.HttpxTransport(
        timeout=30.0,
        transport_factory=lambda _: httpx.MockTransport(handler),
    )
    http.execute(_prepared(timeout=2.5))
    http.execute(_prepared())
    assert seen[0]["read"] == 2.5
    assert seen[1]["read"] == 30.0
