"""Configuration loading and management."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV_VAR = "NEWSREEL_CONFIG"

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class ExtractionConfig(BaseModel):
    """Article fetching and text extraction settings."""

    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = 10.0
    max_chars: int = 1000
    min_paragraph_chars: int = 30
    removed_selectors: list[str] = Field(
        default_factory=lambda: [
            "script",
            "style",
            "nav",
            "header",
            "footer",
            "iframe",
            ".ad",
            ".advertisement",
        ]
    )
    paragraph_selector: str = "article p, .article p, .content p, main p, p"
    placeholder: str = "Unable to extract meaningful content from the URL."


class FramesConfig(BaseModel):
    """How text is cut into timed frames."""

    max_frames: int = 10
    sentence_duration: float = 3.0
    fallback_duration: float = 5.0
    fallback_chars: int = 200


class RenderConfig(BaseModel):
    """Look of the generated HTML document."""

    width: int = 1920
    height: int = 1080
    line_width: int = 50
    font_family: str = "Arial, sans-serif"
    font_size: int = 72
    gradient_start: str = "#667eea"
    gradient_end: str = "#764ba2"
    text_color: str = "white"
    slide_offset: int = 20
    edge_percent: float = 0.1


class Config(BaseModel):
    """Main application configuration."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    frames: FramesConfig = Field(default_factory=FramesConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()

        # Accept a flat "resolution" block as shorthand for width/height
        if "render" in data and "resolution" in data["render"]:
            res = data["render"].pop("resolution")
            data["render"]["width"] = res.get("width", 1920)
            data["render"]["height"] = res.get("height", 1080)

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump()
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file or use defaults."""
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or None

    if config_path is None:
        # Look for config.yaml in current directory or project root
        candidates = [Path("config.yaml"), Path(__file__).parent.parent / "config.yaml"]
        for candidate in candidates:
            if candidate.exists():
                config_path = candidate
                break

    if config_path is not None:
        return Config.from_yaml(config_path)

    return Config()
