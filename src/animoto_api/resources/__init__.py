"""Resources tracked by the Animoto API and the manifests that create them."""

from .base import BaseResource, Resource, ResourceState, media_type
from .jobs import DirectingAndRenderingJob, DirectingJob, Job, RenderingJob
from .manifests import (
    DirectingManifest,
    Footage,
    Framerate,
    HttpCallbackFormat,
    Image,
    Pacing,
    RenderingManifest,
    RenderingParameters,
    Resolution,
    Song,
    TitleCard,
)
from .media import Storyboard, Video

__all__ = [
    "BaseResource",
    "DirectingAndRenderingJob",
    "DirectingJob",
    "DirectingManifest",
    "Footage",
    "Framerate",
    "HttpCallbackFormat",
    "Image",
    "Job",
    "Pacing",
    "RenderingJob",
    "RenderingManifest",
    "RenderingParameters",
    "Resolution",
    "Resource",
    "ResourceState",
    "Song",
    "Storyboard",
    "TitleCard",
    "Video",
    "media_type",
]
