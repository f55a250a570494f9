"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ...config import Config, load_config
from .config import WebConfig
from .services.video_service import VideoService


@lru_cache
def get_config() -> WebConfig:
    """Get the web configuration (cached)."""
    return WebConfig()


@lru_cache
def get_app_config() -> Config:
    """Get the pipeline configuration (cached)."""
    return load_config(get_config().config_path)


def get_video_service(
    config: Annotated[Config, Depends(get_app_config)],
) -> VideoService:
    """Get the video service."""
    return VideoService(config=config)


# Type alias for cleaner router signatures
VideoServiceDep = Annotated[VideoService, Depends(get_video_service)]
