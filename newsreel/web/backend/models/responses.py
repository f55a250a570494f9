"""Pydantic response models for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class VideoResponse(BaseModel):
    """Generated video packaged as a data URI."""

    model_config = ConfigDict(populate_by_name=True)

    video_data: str = Field(alias="videoData", description="data:text/html;base64,... URI")


class ErrorResponse(BaseModel):
    """Error envelope returned for 4xx and 5xx responses."""

    error: str
