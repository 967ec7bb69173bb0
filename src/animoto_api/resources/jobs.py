"""Job resources.

A job is created by submitting one or two manifests and then tracked by
reloading its ``self`` link. Each job class knows the ``/jobs/{context}``
endpoint it is posted to and how to lay out its request body.
"""

import abc
from typing import Any, ClassVar

from .base import BaseResource
from .manifests import DirectingManifest, HttpCallbackFormat, RenderingManifest
from .media import Storyboard, Video

COMPLETED_STATE = "completed"
FAILED_STATE = "failed"


class Job(BaseResource, abc.ABC):
    """Base class for submitted jobs."""

    context: ClassVar[str]

    def __init__(self):
        super().__init__()
        self.http_callback: str | None = None
        self.http_callback_format: HttpCallbackFormat | None = None

    @property
    def is_completed(self) -> bool:
        return self.state == COMPLETED_STATE

    @property
    def is_failed(self) -> bool:
        return self.state == FAILED_STATE

    @property
    def storyboard(self) -> Storyboard | None:
        """Storyboard resource linked from this job, if the API returned one."""
        if url := self.links.get("storyboard"):
            return Storyboard(url)
        return None

    @property
    def video(self) -> Video | None:
        """Video resource linked from this job, if the API returned one."""
        if url := self.links.get("video"):
            return Video(url)
        return None

    @abc.abstractmethod
    def manifest_fields(self) -> dict[str, Any]:
        """Manifest entries of the request body."""

    def wire_fields(self) -> dict[str, Any]:
        fields = self.manifest_fields()
        if self.http_callback is not None:
            fields["http_callback"] = self.http_callback
        if self.http_callback_format is not None:
            fields["http_callback_format"] = HttpCallbackFormat(
                self.http_callback_format,
            ).value
        return fields


def _require(manifest, name: str):
    if manifest is None:
        msg = f"{name} must be set before the job is submitted"
        raise ValueError(msg)
    return manifest


class DirectingJob(Job):
    payload_key = "directing_job"
    context = "directing"

    def __init__(self, directing_manifest: DirectingManifest | None = None):
        super().__init__()
        self.directing_manifest = directing_manifest

    def manifest_fields(self) -> dict[str, Any]:
        manifest = _require(self.directing_manifest, "directing_manifest")
        return {"directing_manifest": manifest.to_wire()}


class RenderingJob(Job):
    payload_key = "rendering_job"
    context = "rendering"

    def __init__(self, rendering_manifest: RenderingManifest | None = None):
        super().__init__()
        self.rendering_manifest = rendering_manifest

    def manifest_fields(self) -> dict[str, Any]:
        manifest = _require(self.rendering_manifest, "rendering_manifest")
        return {"rendering_manifest": manifest.to_wire()}


class DirectingAndRenderingJob(Job):
    payload_key = "directing_and_rendering_job"
    context = "directing_and_rendering"

    def __init__(
        self,
        directing_manifest: DirectingManifest | None = None,
        rendering_manifest: RenderingManifest | None = None,
    ):
        super().__init__()
        self.directing_manifest = directing_manifest
        self.rendering_manifest = rendering_manifest

    def manifest_fields(self) -> dict[str, Any]:
        directing = _require(self.directing_manifest, "directing_manifest")
        rendering = _require(self.rendering_manifest, "rendering_manifest")
        return {
            "directing_manifest": directing.to_wire(),
            "rendering_manifest": rendering.to_wire(),
        }
