"""Error taxonomy for the Animoto API client.

Three failure kinds are kept apart so callers can tell whether a request
never reached the server, was rejected by it, or came back in a shape the
API does not document:

- :class:`HttpError`: the HTTP exchange did not complete.
- :class:`HttpExpectationError`: the server answered with an unexpected
  status code.
- :class:`ContractError`: the status code matched but the body did not.
"""


class ApiError(Exception):
    """Base class for all errors raised by the API client."""


class HttpError(ApiError):
    """Raised when the HTTP exchange fails before a response is received.

    The underlying transport exception is chained as ``__cause__``.
    """


class HttpExpectationError(ApiError):
    """Raised when the API responds with a status code other than expected."""

    def __init__(
        self,
        status_code: int,
        body: str,
        expected_status: int,
        api_errors: list[str] | None = None,
    ):
        """Initialize the error.

        Args:
            status_code: Status code actually returned by the API.
            body: Raw response body.
            expected_status: Status code the operation required.
            api_errors: Error messages extracted from the API envelope, if any.
        """
        self.status_code = status_code
        self.body = body
        self.expected_status = expected_status
        self.api_errors = api_errors or []
        msg = f"Expected HTTP {expected_status} but received {status_code}"
        if self.api_errors:
            msg += f": {'; '.join(self.api_errors)}"
        super().__init__(msg)


class ContractError(ApiError):
    """Raised when a successful response violates the documented schema."""

    def __init__(self, message: str, body: str):
        self.body = body
        super().__init__(message)
