"""API routers for the web backend."""

from .pages import router as pages_router
from .videos import router as videos_router

__all__ = [
    "pages_router",
    "videos_router",
]
