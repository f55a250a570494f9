"""HTTP fetching for article pages using httpx."""

import logging
from typing import Protocol

import httpx

from ..config import DEFAULT_USER_AGENT
from ..errors import FetchError

logger = logging.getLogger(__name__)

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 10.0


class HttpFetcher(Protocol):
    """Anything that can turn a URL into a raw response body."""

    async def fetch(self, url: str) -> str:
        """Return the body of ``url``; raise FetchError on any failure."""
        ...


class HttpxFetcher:
    """Fetch pages with an ``httpx.AsyncClient``.

    A new client is opened per call, so instances carry no connection state
    between requests.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the fetcher.

        Args:
            user_agent: User-Agent header sent with every request.
            timeout: Request timeout in seconds.
            transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> str:
        """Fetch HTML content from a URL.

        Args:
            url: The URL to fetch

        Returns:
            Response body as text

        Raises:
            FetchError: On network errors, timeouts and non-2xx responses
        """
        headers = {"User-Agent": self.user_agent}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise FetchError(str(e), url=url, status_code=e.response.status_code) from e
        except httpx.TimeoutException as e:
            raise FetchError(f"Request timed out after {self.timeout}s", url=url) from e
        except httpx.HTTPError as e:
            raise FetchError(str(e) or type(e).__name__, url=url) from e
