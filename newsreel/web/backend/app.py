"""FastAPI application factory."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ... import __version__
from .config import WebConfig
from .dependencies import get_config
from .routers import pages_router, videos_router


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic validation errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Return every error as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": format_validation_errors(exc)},
        )


def create_app(config: WebConfig | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Optional configuration. Uses defaults if not provided.

    Returns:
        The FastAPI application.
    """
    if config is None:
        config = get_config()

    app = FastAPI(
        title="Newsreel API",
        description="Turn news articles or custom text into animated HTML videos",
        version=__version__,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(pages_router)
    app.include_router(videos_router, prefix="/api")

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    return app
