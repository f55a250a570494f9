"""Exception types shared across the pipeline."""


class NewsreelError(Exception):
    """Base class for all newsreel errors."""


class FetchError(NewsreelError):
    """Raised when a page cannot be fetched."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExtractionError(NewsreelError):
    """Raised when article text cannot be extracted from a URL."""


class MissingInputError(NewsreelError, ValueError):
    """Raised when neither a news URL nor custom text was supplied."""
