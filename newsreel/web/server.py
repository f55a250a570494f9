"""Run the web server with uvicorn."""

import os
from pathlib import Path

import uvicorn

from ..config import CONFIG_ENV_VAR
from ..logging_utils import configure_logging
from .backend.dependencies import get_config


def serve(
    host: str = "127.0.0.1",
    port: int = 8000,
    config_path: Path | None = None,
    log_level: str = "INFO",
    reload: bool = False,
) -> int:
    """Configure logging and run uvicorn with the app factory."""
    configure_logging(log_level)

    # Point the cached web config at the pipeline config file
    config = get_config()
    config.config_path = config_path
    if config_path is not None:
        # Reload workers run in a fresh process and only see the environment
        os.environ[CONFIG_ENV_VAR] = str(config_path)

    print("Starting Newsreel Web Interface...")
    print(f"  Host: {host}")
    print(f"  Port: {port}")
    print(f"  URL: http://{host}:{port}")
    print()

    uvicorn.run(
        "newsreel.web.backend.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_config=None,
    )

    return 0
