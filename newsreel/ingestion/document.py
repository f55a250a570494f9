"""Queryable HTML document backed by BeautifulSoup."""

from typing import Protocol

from bs4 import BeautifulSoup


class HtmlNode(Protocol):
    def get_text(self) -> str: ...


class HtmlDocument(Protocol):
    """Minimal read/prune interface the content extractor needs."""

    def remove(self, selector: str) -> None:
        """Delete every element matching a CSS selector."""
        ...

    def select(self, selector: str) -> list[HtmlNode]:
        """Return matching elements in document order, each once."""
        ...

    def select_one(self, selector: str) -> HtmlNode | None:
        ...

    def text(self) -> str:
        """Text of <body>, or of the whole document when there is no body."""
        ...


class SoupDocument:
    """HtmlDocument implementation over a BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def remove(self, selector: str) -> None:
        for element in self.soup.select(selector):
            element.decompose()

    def select(self, selector: str) -> list[HtmlNode]:
        return list(self.soup.select(selector))

    def select_one(self, selector: str) -> HtmlNode | None:
        return self.soup.select_one(selector)

    def text(self) -> str:
        body = self.soup.find("body")
        return (body or self.soup).get_text()


def parse_html(raw: str) -> HtmlDocument:
    """Parse a raw response body into a SoupDocument."""
    return SoupDocument(BeautifulSoup(raw, "html.parser"))
