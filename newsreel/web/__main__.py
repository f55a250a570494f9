"""Entry point for the web server.

Usage:
    python -m newsreel.web [--port PORT] [--host HOST] [--config FILE]
"""

import argparse
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run the web server."""
    parser = argparse.ArgumentParser(
        description="Newsreel Web Interface",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the server on",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a config.yaml file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    args = parser.parse_args(argv)

    # Import here to avoid loading FastAPI before parsing args
    from .server import serve

    return serve(
        host=args.host,
        port=args.port,
        config_path=args.config,
        log_level=args.log_level,
        reload=args.reload,
    )


if __name__ == "__main__":
    sys.exit(main())
