"""Article text extraction from news URLs."""

import logging
from typing import Callable

from ..config import ExtractionConfig
from ..errors import ExtractionError, FetchError
from ..frames.text import clean_text
from .document import HtmlDocument, parse_html
from .fetcher import HttpFetcher, HttpxFetcher

logger = logging.getLogger(__name__)


def strip_non_content(document: HtmlDocument, selectors: list[str]) -> None:
    """Remove scripts, navigation, ads and similar elements in place."""
    for selector in selectors:
        document.remove(selector)


def extract_title(document: HtmlDocument) -> str:
    """Return the trimmed text of the first <h1>, or an empty string."""
    heading = document.select_one("h1")
    if heading is None:
        return ""
    return heading.get_text().strip()


def extract_paragraphs(document: HtmlDocument, selector: str, min_chars: int) -> list[str]:
    """Collect trimmed paragraph texts longer than ``min_chars`` characters."""
    paragraphs = []
    for element in document.select(selector):
        text = element.get_text().strip()
        if len(text) > min_chars:
            paragraphs.append(text)
    return paragraphs


def extract_article_text(document: HtmlDocument, config: ExtractionConfig | None = None) -> str:
    """Pull readable text out of a parsed page.

    The first heading is used as a title prefix, followed by every long
    enough paragraph. When neither exists the page's full text is used.
    The result is whitespace-collapsed and cut to ``max_chars``.

    Args:
        document: Parsed page, pruned in place
        config: Extraction settings

    Returns:
        Extracted text, or the configured placeholder when nothing is left
    """
    config = config or ExtractionConfig()

    strip_non_content(document, config.removed_selectors)

    content = ""

    title = extract_title(document)
    if title:
        content += title + ". "

    for paragraph in extract_paragraphs(
        document, config.paragraph_selector, config.min_paragraph_chars
    ):
        content += paragraph + " "

    if not content:
        content = document.text().strip()

    content = clean_text(content)[: config.max_chars]

    return content or config.placeholder


class ContentExtractor:
    """Fetch a news page and extract its article text.

    The HTTP fetcher and HTML parser are injected so either can be replaced
    with a fake.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        fetcher: HttpFetcher | None = None,
        parser: Callable[[str], HtmlDocument] = parse_html,
    ):
        self.config = config or ExtractionConfig()
        self.fetcher = fetcher or HttpxFetcher(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )
        self.parser = parser

    async def extract(self, url: str) -> str:
        """Fetch ``url`` and return its extracted text.

        Raises:
            ExtractionError: If fetching or parsing fails
        """
        logger.info("Fetching article from %s", url)

        try:
            raw = await self.fetcher.fetch(url)
            document = self.parser(raw)
            content = extract_article_text(document, self.config)
        except FetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            raise ExtractionError(f"Failed to fetch news content: {e}") from e
        except Exception as e:
            # Parser failures on malformed bodies
            logger.warning("Extraction failed for %s: %s", url, e)
            raise ExtractionError(f"Failed to fetch news content: {e}") from e

        logger.info("Extracted %d characters from %s", len(content), url)
        return content
