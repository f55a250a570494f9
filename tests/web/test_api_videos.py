"""Tests for the video generation API."""

import base64
import re
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from newsreel.errors import ExtractionError


def decode_video(video_data: str) -> str:
    prefix = "data:text/html;base64,"
    assert video_data.startswith(prefix)
    return base64.b64decode(video_data[len(prefix):]).decode("utf-8")


class TestGenerateVideoAPI:
    """Tests for POST /api/generate-video."""

    def test_custom_text(self, test_client: TestClient) -> None:
        """Custom text returns a data URI document."""
        response = test_client.post("/api/generate-video", json={"customText": "Breaking news."})

        assert response.status_code == 200
        body = response.json()
        assert list(body) == ["videoData"]
        assert body["videoData"].startswith("data:text/html;base64,")

    def test_document_has_frame_per_sentence(self, test_client: TestClient) -> None:
        """The decoded document is a full page with one .frame per sentence."""
        response = test_client.post(
            "/api/generate-video", json={"customText": "One. Two! Three?"}
        )

        html = decode_video(response.json()["videoData"])
        assert html.startswith("<!DOCTYPE html>")
        assert len(re.findall(r'class="frame frame-\d+"', html)) == 3

    def test_news_url(self, test_client: TestClient, fake_fetcher) -> None:
        """A news URL is fetched and its text rendered."""
        response = test_client.post(
            "/api/generate-video", json={"newsUrl": "https://news.example/story"}
        )

        assert response.status_code == 200
        html = decode_video(response.json()["videoData"])
        assert "Scientists Discover New Species." in html
        assert fake_fetcher.requested == ["https://news.example/story"]

    def test_missing_inputs(self, test_client: TestClient, fake_fetcher) -> None:
        """Neither field gives a 400 without attempting extraction."""
        response = test_client.post("/api/generate-video", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Please provide either newsUrl or customText"}
        assert fake_fetcher.requested == []

    def test_empty_strings_count_as_missing(self, test_client: TestClient) -> None:
        response = test_client.post("/api/generate-video", json={"newsUrl": "", "customText": ""})
        assert response.status_code == 400

    def test_extraction_failure(
        self, test_client: TestClient, video_service, failing_fetcher
    ) -> None:
        """Fetch failures surface as 500 with the error message."""
        video_service.generator.extractor.fetcher = failing_fetcher

        response = test_client.post(
            "/api/generate-video", json={"newsUrl": "https://news.example"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to fetch news content: Connection refused"
        }

    def test_unexpected_failure(self, test_client: TestClient, video_service) -> None:
        """Any other failure is caught at the request boundary."""
        video_service.generator.generate = AsyncMock(side_effect=RuntimeError("render broke"))

        response = test_client.post("/api/generate-video", json={"customText": "Hi."})

        assert response.status_code == 500
        assert response.json() == {"error": "render broke"}

    def test_extraction_error_type(self, test_client: TestClient, video_service) -> None:
        video_service.generator.generate = AsyncMock(
            side_effect=ExtractionError("Failed to fetch news content: timeout")
        )

        response = test_client.post("/api/generate-video", json={"newsUrl": "https://x.example"})

        assert response.status_code == 500
        assert "timeout" in response.json()["error"]

    def test_malformed_json(self, test_client: TestClient) -> None:
        """Unparseable bodies are a client error."""
        response = test_client.post(
            "/api/generate-video",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_wrong_field_type(self, test_client: TestClient) -> None:
        response = test_client.post("/api/generate-video", json={"customText": 42})

        assert response.status_code == 400
        assert "customText" in response.json()["error"]


class TestPagesAPI:
    """Tests for the form page and health check."""

    def test_health(self, test_client: TestClient) -> None:
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_index_serves_form(self, test_client: TestClient) -> None:
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'id="newsUrl"' in response.text
        assert 'id="customText"' in response.text
        assert "/api/generate-video" in response.text

    def test_unknown_route_uses_error_envelope(self, test_client: TestClient) -> None:
        response = test_client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
