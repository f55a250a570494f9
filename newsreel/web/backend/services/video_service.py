"""Video service wrapping the generation pipeline."""

from ....config import Config
from ....ingestion import ContentExtractor
from ....pipeline import VideoGenerator


class VideoService:
    """Service for generating videos from request input."""

    def __init__(self, config: Config, extractor: ContentExtractor | None = None):
        """Initialize the video service.

        Args:
            config: Application configuration.
            extractor: Optional content extractor override.
        """
        self.generator = VideoGenerator(config=config, extractor=extractor)

    async def create_video(
        self,
        news_url: str | None = None,
        custom_text: str | None = None,
    ) -> str:
        """Generate a video and return it as a data URI.

        Raises:
            MissingInputError: If both inputs are empty.
            ExtractionError: If the news URL cannot be fetched.
        """
        result = await self.generator.generate(news_url=news_url, custom_text=custom_text)
        return result.video_data
