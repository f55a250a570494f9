"""Router serving the presentation form."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).parent.parent / "static"

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the video generation form."""
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")
