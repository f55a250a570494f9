"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class GenerateVideoRequest(BaseModel):
    """Request to generate a video from a news URL or custom text.

    Both fields are optional here; the endpoint rejects a request where
    both are empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    news_url: str | None = Field(default=None, alias="newsUrl", description="News article URL")
    custom_text: str | None = Field(
        default=None, alias="customText", description="Literal text used when no URL is given"
    )
