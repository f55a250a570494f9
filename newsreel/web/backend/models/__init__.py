"""Pydantic models for API requests and responses."""

from .requests import GenerateVideoRequest
from .responses import ErrorResponse, VideoResponse

__all__ = [
    # Requests
    "GenerateVideoRequest",
    # Responses
    "ErrorResponse",
    "VideoResponse",
]
