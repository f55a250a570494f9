"""Content ingestion - fetch news pages and extract readable text."""

from .document import HtmlDocument, SoupDocument, parse_html
from .fetcher import HttpFetcher, HttpxFetcher
from .url import ContentExtractor, extract_article_text

__all__ = [
    "ContentExtractor",
    "HtmlDocument",
    "HttpFetcher",
    "HttpxFetcher",
    "SoupDocument",
    "extract_article_text",
    "parse_html",
]
