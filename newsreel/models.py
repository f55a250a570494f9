"""
Core data models used across the application.

Includes models for:
- Timed frames produced from article or custom text
- Timing windows computed for the keyframe animation
- The result returned by the generation pipeline
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# SOURCE MODELS
# ============================================================================


class SourceType(str, Enum):
    """Where the video text came from."""

    URL = "url"
    TEXT = "text"


# ============================================================================
# FRAME MODELS
# ============================================================================


class Frame(BaseModel):
    """A timed unit of displayed text.

    Frames are immutable once built. Their position in a sequence decides
    playback order and timing offset.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    duration: float = Field(gt=0, description="Display time in seconds")


class FrameWindow(BaseModel):
    """Visible window of one frame along the animation timeline, in percent."""

    model_config = ConfigDict(frozen=True)

    index: int
    start_percent: float
    end_percent: float

    @property
    def span(self) -> float:
        return self.end_percent - self.start_percent


# ============================================================================
# PIPELINE MODELS
# ============================================================================


class VideoResult(BaseModel):
    """Output of one generation run."""

    source: SourceType
    content: str = Field(description="Text the frames were built from")
    frames: list[Frame]
    html: str = Field(description="Complete HTML document")
    video_data: str = Field(description="Document encoded as a data URI")

    @property
    def total_duration(self) -> float:
        return sum(frame.duration for frame in self.frames)
