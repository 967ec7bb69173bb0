"""API credentials."""

from dataclasses import dataclass, field

import httpx


@dataclass(frozen=True)
class Credentials:
    """Animoto API key and secret.

    Immutable once constructed. The secret is kept out of ``repr`` so that
    credentials never end up in log lines.
    """

    key: str
    secret: str = field(repr=False)

    def __post_init__(self):
        if not self.key:
            msg = "key cannot be empty"
            raise ValueError(msg)
        if not self.secret:
            msg = "secret cannot be empty"
            raise ValueError(msg)

    def basic_auth(self) -> httpx.BasicAuth:
        """Return an httpx Basic-Auth flow for these credentials."""
        return httpx.BasicAuth(self.key, self.secret)
