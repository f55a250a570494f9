"""Shared test fixtures."""

import logging

import pytest

from newsreel.config import Config
from newsreel.errors import FetchError
from newsreel.ingestion import ContentExtractor


class FakeFetcher:
    """HttpFetcher that serves canned bodies and records requested URLs."""

    def __init__(self, body: str = "", error: Exception | None = None):
        self.body = body
        self.error = error
        self.requested: list[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging calls made by the code under test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_config() -> Config:
    """Provide a default configuration."""
    return Config()


@pytest.fixture
def sample_article_html() -> str:
    """A small news page with chrome around the article body."""
    return """
<html>
<head>
  <title>Site Title</title>
  <style>.ad { color: red; }</style>
  <script>console.log("tracking");</script>
</head>
<body>
  <header><p>Subscribe now to get the best news delivered to your inbox.</p></header>
  <nav><a href="/">Home</a><p>Navigation paragraph that is long enough to count.</p></nav>
  <article>
    <h1>  Scientists Discover New Species  </h1>
    <p>Researchers found a new species of frog in the rainforest today.</p>
    <p>Too short.</p>
    <div class="ad"><p>Buy our product today, it is the best product ever made.</p></div>
    <p>The discovery was announced at a press conference on Monday!</p>
  </article>
  <footer><p>Copyright notice and other footer text that is quite long.</p></footer>
</body>
</html>
"""


@pytest.fixture
def make_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher


@pytest.fixture
def fake_fetcher(sample_article_html: str) -> FakeFetcher:
    """Fetcher returning the sample article."""
    return FakeFetcher(body=sample_article_html)


@pytest.fixture
def failing_fetcher() -> FakeFetcher:
    """Fetcher that always fails."""
    return FakeFetcher(error=FetchError("Connection refused", url="https://news.example"))


@pytest.fixture
def extractor(test_config: Config, fake_fetcher: FakeFetcher) -> ContentExtractor:
    """Content extractor wired to the fake fetcher."""
    return ContentExtractor(config=test_config.extraction, fetcher=fake_fetcher)
