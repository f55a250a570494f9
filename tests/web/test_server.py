"""Tests for the web server entry points."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from newsreel.config import CONFIG_ENV_VAR
from newsreel.web.__main__ import main
from newsreel.web.backend.dependencies import get_config


@pytest.fixture(autouse=True)
def fresh_web_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


class TestServe:
    """Tests for starting uvicorn."""

    def test_runs_app_factory(self) -> None:
        with patch("newsreel.web.server.configure_logging"), patch(
            "newsreel.web.server.uvicorn.run"
        ) as run:
            assert main(["--port", "9000", "--host", "0.0.0.0"]) == 0

        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("newsreel.web.backend.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9000
        assert kwargs["host"] == "0.0.0.0"
        assert get_config().config_path is None

    def test_config_path_exported(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        with patch("newsreel.web.server.configure_logging"), patch(
            "newsreel.web.server.uvicorn.run"
        ), patch.dict("os.environ", {}, clear=False):
            main(["--config", str(config_file)])
            assert os.environ[CONFIG_ENV_VAR] == str(config_file)
        assert get_config().config_path == config_file


class TestWebConfig:
    """Tests for web backend settings."""

    def test_no_cross_origin_callers_by_default(self) -> None:
        """The form is served same-origin, so no CORS origins are allowed."""
        assert get_config().cors_origins == []
