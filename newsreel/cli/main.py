"""Main CLI entry point for newsreel.

Usage:
    python -m newsreel.cli generate --url <url> -o video.html    # Article to HTML file
    python -m newsreel.cli generate --text "Breaking news."       # Custom text
    python -m newsreel.cli generate --text-file story.txt --data-uri
    python -m newsreel.cli frames --text "One. Two! Three?"       # Show frame timing
    python -m newsreel.cli serve --port 8000                      # Run the web server
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..config import load_config
from ..errors import NewsreelError
from ..logging_utils import configure_logging

console = Console()
err_console = Console(stderr=True)


def read_input(args: argparse.Namespace) -> tuple[str | None, str | None]:
    """Return (news_url, custom_text) from the mutually exclusive input flags."""
    if args.text_file:
        return None, Path(args.text_file).read_text(encoding="utf-8")
    return args.url, args.text


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a video document and write it to a file or stdout."""
    from ..pipeline import VideoGenerator

    generator = VideoGenerator(config=load_config(args.config))

    try:
        news_url, custom_text = read_input(args)
        result = generator.generate_sync(news_url=news_url, custom_text=custom_text)
    except (NewsreelError, OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        return 1

    if args.data_uri:
        print(result.video_data)
        return 0

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.html, encoding="utf-8")

    console.print(
        f"[green]Wrote[/green] {output} "
        f"({len(result.frames)} frame(s), {result.total_duration:g}s loop)"
    )
    return 0


def cmd_frames(args: argparse.Namespace) -> int:
    """Print the frames and timing windows for some input."""
    from ..pipeline import VideoGenerator
    from ..render import compute_windows

    generator = VideoGenerator(config=load_config(args.config))

    try:
        news_url, custom_text = read_input(args)
        result = generator.generate_sync(news_url=news_url, custom_text=custom_text)
    except (NewsreelError, OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        return 1

    table = Table(title=f"Frames ({result.source.value})")
    table.add_column("#", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("Window", justify="right", style="cyan")
    table.add_column("Text")

    for frame, window in zip(result.frames, compute_windows(result.frames)):
        table.add_row(
            str(window.index),
            f"{frame.duration:g}s",
            f"{window.start_percent:.2f}% - {window.end_percent:.2f}%",
            frame.text,
        )

    console.print(table)
    console.print(f"\n[bold]Loop:[/bold] {result.total_duration:g}s")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the web server."""
    from ..web.server import serve

    return serve(
        host=args.host,
        port=args.port,
        config_path=Path(args.config) if args.config else None,
        log_level=args.log_level or "INFO",
        reload=args.reload,
    )


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--url", help="News article URL to fetch")
    group.add_argument("--text", help="Custom news text")
    group.add_argument("--text-file", help="Read custom news text from a file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Newsreel - animated news videos as HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: ./config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: WARNING, INFO for serve)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate command
    generate_parser = subparsers.add_parser("generate", help="Generate a video document")
    add_input_arguments(generate_parser)
    generate_parser.add_argument(
        "--output", "-o",
        default="video.html",
        help="Output HTML file (default: video.html)",
    )
    generate_parser.add_argument(
        "--data-uri",
        action="store_true",
        help="Print the data URI to stdout instead of writing a file",
    )
    generate_parser.set_defaults(func=cmd_generate)

    # frames command
    frames_parser = subparsers.add_parser("frames", help="Show frames and timing")
    add_input_arguments(frames_parser)
    frames_parser.set_defaults(func=cmd_frames)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the web server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level or "WARNING")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
