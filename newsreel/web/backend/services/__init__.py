"""Service layer for the web backend.

Services wrap the core pipeline to provide a clean interface
for API endpoints.
"""

from .video_service import VideoService

__all__ = ["VideoService"]
