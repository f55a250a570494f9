"""Test fixtures for web backend tests."""

import pytest
from fastapi.testclient import TestClient

from newsreel.config import Config
from newsreel.ingestion import ContentExtractor
from newsreel.web.backend import dependencies
from newsreel.web.backend.app import create_app
from newsreel.web.backend.config import WebConfig
from newsreel.web.backend.services.video_service import VideoService


@pytest.fixture
def web_config() -> WebConfig:
    """Web configuration for tests."""
    return WebConfig(cors_origins=["http://testserver"])


@pytest.fixture
def video_service(test_config: Config, extractor: ContentExtractor) -> VideoService:
    """Video service whose extractor never touches the network."""
    return VideoService(config=test_config, extractor=extractor)


@pytest.fixture
def test_client(web_config: WebConfig, video_service: VideoService) -> TestClient:
    """Create a test client with the fake-backed video service."""
    app = create_app(web_config)
    app.dependency_overrides[dependencies.get_video_service] = lambda: video_service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
