"""Storyboard and video resources produced by jobs."""

from typing import Any

from pydantic import Field

from .base import BaseResource, ResourceState


class MediaState(ResourceState):
    metadata: dict[str, Any] = Field(default_factory=dict)


class Storyboard(BaseResource):
    """A directed storyboard, reachable through a job's ``storyboard`` link."""

    payload_key = "storyboard"
    state_model = MediaState

    def __init__(self, location: str | None = None):
        super().__init__(location)
        self.metadata: dict[str, Any] = {}

    @property
    def duration(self) -> float | None:
        return self.metadata.get("duration")


class Video(BaseResource):
    """A rendered video, reachable through a job's ``video`` link."""

    payload_key = "video"
    state_model = MediaState

    def __init__(self, location: str | None = None):
        super().__init__(location)
        self.metadata: dict[str, Any] = {}

    @property
    def file_url(self) -> str | None:
        """Download URL of the rendered file, once available."""
        return self.links.get("file")

    @property
    def cover_image_url(self) -> str | None:
        return self.links.get("cover_image")
