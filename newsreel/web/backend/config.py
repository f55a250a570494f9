"""Configuration for the web backend."""

from pathlib import Path

from pydantic import BaseModel


class WebConfig(BaseModel):
    """Web server configuration."""

    config_path: Path | None = None
    # The form is served from the same origin, so no cross-origin callers by default
    cors_origins: list[str] = []
