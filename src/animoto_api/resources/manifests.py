"""Manifest models describing production instructions.

Pydantic models for the payloads callers author. They serialise to the
JSON shape the Animoto API expects, omitting unset optional fields.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class HttpCallbackFormat(str, Enum):
    """Payload format of the status callbacks the API sends."""

    JSON = "json"
    XML = "xml"


class Pacing(str, Enum):
    DEFAULT = "default"
    HALF = "half"
    DOUBLE = "double"


class Resolution(str, Enum):
    R180P = "180p"
    R240P = "240p"
    R360P = "360p"
    R480P = "480p"
    R720P = "720p"
    R1080P = "1080p"


class Framerate(int, Enum):
    FPS_12 = 12
    FPS_15 = 15
    FPS_24 = 24
    FPS_30 = 30


class Image(BaseModel):
    """Still image visual."""

    type: Literal["image"] = "image"
    source_url: str
    spotlit: bool | None = None
    rotation: int | None = Field(None, ge=0, le=3)


class TitleCard(BaseModel):
    """Text-only title card visual."""

    type: Literal["title_card"] = "title_card"
    h1: str
    h2: str | None = None
    spotlit: bool | None = None


class Footage(BaseModel):
    """Video clip visual."""

    type: Literal["footage"] = "footage"
    source_url: str
    start_time: float | None = Field(None, ge=0)
    duration: float | None = Field(None, gt=0)
    audio_mix: Literal["MUTE", "MIX"] | None = None


Visual = Annotated[Image | TitleCard | Footage, Field(discriminator="type")]


class Song(BaseModel):
    source_url: str
    start_time: float | None = Field(None, ge=0)
    duration: float | None = Field(None, gt=0)


class DirectingManifest(BaseModel):
    """Instructions for directing a storyboard from visuals and a song."""

    title: str | None = None
    pacing: Pacing = Pacing.DEFAULT
    style: str = "original"
    visuals: list[Visual] = Field(default_factory=list)
    song: Song | None = None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class RenderingParameters(BaseModel):
    resolution: Resolution = Resolution.R720P
    framerate: Framerate = Framerate.FPS_30
    format: Literal["h264"] = "h264"


class RenderingManifest(BaseModel):
    """Instructions for rendering a directed storyboard into a video.

    ``storyboard_url`` points at the storyboard to render. It is cleared
    when the manifest is submitted together with a directing manifest,
    since the storyboard is then produced by the same job.
    """

    storyboard_url: str | None = None
    rendering_parameters: RenderingParameters = Field(
        default_factory=RenderingParameters,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
