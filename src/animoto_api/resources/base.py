"""Resource capability shared by everything the API tracks.

A resource knows where it lives, which media types it speaks, how to write
itself as a request body and how to read its state back from a response
body. Hydration is split in two steps: :meth:`BaseResource.parse_body`
validates the whole body without touching the resource, and
:meth:`BaseResource.hydrate` assigns the already-validated state. A body
that fails validation therefore never leaves a resource half-updated.
"""

import json
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MEDIA_TYPE_TEMPLATE = "application/vnd.animoto.{key}-v1+json"


def media_type(payload_key: str) -> str:
    """Return the vendor media type for a resource payload key."""
    return MEDIA_TYPE_TEMPLATE.format(key=payload_key)


class ResourceState(BaseModel):
    """Server-assigned resource fields.

    Accepts ``status`` as an alias of ``state`` and coerces numeric ids to
    strings. Every resource carries an id; other fields are optional and
    unknown fields are ignored.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    id: str = Field(min_length=1)
    state: str | None = Field(None, validation_alias=AliasChoices("state", "status"))
    links: dict[str, str] = Field(default_factory=dict)


@runtime_checkable
class Resource(Protocol):
    """Capability set of any entity that can be submitted or reloaded."""

    location: str | None

    @property
    def accept(self) -> str: ...

    @property
    def content_type(self) -> str: ...

    def to_wire_body(self) -> str: ...

    def parse_body(self, body: str) -> ResourceState: ...

    def hydrate(self, state: ResourceState) -> None: ...

    def hydrate_from(self, body: str) -> None: ...


def _unwrap_envelope(document: dict[str, Any], payload_key: str) -> Any:
    """Return the resource object from an API response document.

    The API wraps resources as ``{"response": {"payload": {key: {...}}}}``;
    bare resource objects are returned unchanged.
    """
    if "response" not in document:
        return document
    envelope = document["response"]
    if not isinstance(envelope, dict):
        msg = "Response envelope is not an object"
        raise ValueError(msg)  # noqa: TRY004
    payload = envelope.get("payload")
    if not isinstance(payload, dict) or payload_key not in payload:
        msg = f"Response payload has no '{payload_key}' object"
        raise ValueError(msg)
    return payload[payload_key]


class BaseResource:
    """Common implementation of the :class:`Resource` capability."""

    payload_key: ClassVar[str]
    state_model: ClassVar[type[ResourceState]] = ResourceState

    def __init__(self, location: str | None = None):
        self.location = location
        self.id: str | None = None
        self.state: str | None = None
        self.links: dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, state={self.state!r}, "
            f"location={self.location!r})"
        )

    @property
    def accept(self) -> str:
        return media_type(self.payload_key)

    @property
    def content_type(self) -> str:
        return media_type(self.payload_key)

    def wire_fields(self) -> dict[str, Any]:
        """Fields written under the payload key of the request body."""
        return {}

    def to_wire_body(self) -> str:
        return json.dumps({self.payload_key: self.wire_fields()})

    def parse_body(self, body: str) -> ResourceState:
        """Validate a response body into this resource's state model.

        Raises:
            ValueError: If the body is not JSON, not an object, or does not
                match the state model (``pydantic.ValidationError`` is a
                ``ValueError``).
        """
        document = json.loads(body)
        if not isinstance(document, dict):
            msg = "Response body is not a JSON object"
            raise ValueError(msg)  # noqa: TRY004
        return self.state_model.model_validate(
            _unwrap_envelope(document, self.payload_key),
        )

    def hydrate(self, state: ResourceState) -> None:
        """Assign exactly the fields present in the parsed response."""
        for name in state.model_fields_set:
            setattr(self, name, getattr(state, name))
        if "self" in state.links:
            self.location = state.links["self"]

    def hydrate_from(self, body: str) -> None:
        self.hydrate(self.parse_body(body))
