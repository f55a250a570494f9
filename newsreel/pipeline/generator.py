"""Video generation pipeline: input -> text -> frames -> animated document."""

import asyncio
import logging

from ..config import Config, load_config
from ..errors import MissingInputError
from ..frames import build_frames
from ..ingestion import ContentExtractor
from ..models import SourceType, VideoResult
from ..render import render_document, to_data_uri

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please provide either newsUrl or customText"


class VideoGenerator:
    """Orchestrate one generation run.

    A URL takes precedence over custom text. Every run builds its frames and
    document from scratch; nothing is shared between runs except config.
    """

    def __init__(
        self,
        config: Config | None = None,
        extractor: ContentExtractor | None = None,
    ):
        """Initialize the generator.

        Args:
            config: Configuration object. If None, loads from config.yaml.
            extractor: Content extractor for URLs. Built from config if None.
        """
        self.config = config or load_config()
        self.extractor = extractor or ContentExtractor(self.config.extraction)

    async def resolve_content(
        self,
        news_url: str | None = None,
        custom_text: str | None = None,
    ) -> tuple[SourceType, str]:
        """Return the text to animate and where it came from.

        Raises:
            MissingInputError: If both inputs are empty
            ExtractionError: If the URL cannot be fetched
        """
        if news_url:
            return SourceType.URL, await self.extractor.extract(news_url)
        if custom_text:
            return SourceType.TEXT, custom_text
        raise MissingInputError(MISSING_INPUT_MESSAGE)

    async def generate(
        self,
        news_url: str | None = None,
        custom_text: str | None = None,
    ) -> VideoResult:
        """Run the full pipeline.

        Args:
            news_url: Article to fetch and summarize
            custom_text: Literal text, used when no URL is given

        Returns:
            VideoResult with frames, HTML and the data URI
        """
        source, content = await self.resolve_content(news_url, custom_text)

        frames = build_frames(content, self.config.frames)
        html = render_document(frames, self.config.render)

        logger.info(
            "Rendered %d frame(s) from %s input (%.1fs loop)",
            len(frames),
            source.value,
            sum(frame.duration for frame in frames),
        )

        return VideoResult(
            source=source,
            content=content,
            frames=frames,
            html=html,
            video_data=to_data_uri(html),
        )

    def generate_sync(
        self,
        news_url: str | None = None,
        custom_text: str | None = None,
    ) -> VideoResult:
        """Synchronous wrapper for generate."""
        return asyncio.run(self.generate(news_url=news_url, custom_text=custom_text))
