"""Render frames as a self-contained HTML document driven by CSS keyframes."""

import html

from ..config import RenderConfig
from ..frames.text import wrap_text
from ..models import Frame, FrameWindow
from .timing import compute_windows, total_duration


def format_number(value: float) -> str:
    """Format a CSS number compactly: 0, 3, 33.333333."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def render_keyframes(window: FrameWindow, loop_seconds: float, config: RenderConfig) -> str:
    """CSS rule and @keyframes block for one frame.

    The frame is hidden and pushed down until its window opens, visible
    and centered inside it, then hidden and pushed up until the loop ends.
    The stop before the window opens is clamped at 0 and the stop before
    it closes never precedes its start, so stops stay in order.
    """
    index = window.index
    edge = config.edge_percent
    offset = config.slide_offset

    before_start = format_number(max(window.start_percent - edge, 0.0))
    start = format_number(window.start_percent)
    before_end = format_number(max(window.end_percent - edge, window.start_percent))
    end = format_number(window.end_percent)

    return f"""
      .frame-{index} {{
        animation: fadeInOut-{index} {format_number(loop_seconds)}s linear infinite;
      }}

      @keyframes fadeInOut-{index} {{
        0%, {before_start}% {{
          opacity: 0;
          transform: translateY({offset}px);
        }}
        {start}% {{
          opacity: 1;
          transform: translateY(0);
        }}
        {before_end}% {{
          opacity: 1;
          transform: translateY(0);
        }}
        {end}%, 100% {{
          opacity: 0;
          transform: translateY(-{offset}px);
        }}
      }}
"""


def render_frame_markup(index: int, frame: Frame, line_width: int) -> str:
    """Markup for one frame: one .line element per wrapped line."""
    lines = "".join(
        f'<div class="line">{html.escape(line)}</div>'
        for line in wrap_text(frame.text, line_width)
    )
    return f"""
      <div class="frame frame-{index}">
        {lines}
      </div>
"""


def render_document(frames: list[Frame], config: RenderConfig | None = None) -> str:
    """Render a complete HTML document that plays ``frames`` in a loop.

    Args:
        frames: Non-empty ordered frame sequence
        config: Canvas and typography settings

    Returns:
        The HTML document

    Raises:
        ValueError: If ``frames`` is empty
    """
    config = config or RenderConfig()

    windows = compute_windows(frames)
    loop_seconds = total_duration(frames)

    animations = "".join(render_keyframes(w, loop_seconds, config) for w in windows)
    frame_html = "".join(
        render_frame_markup(index, frame, config.line_width)
        for index, frame in enumerate(frames)
    )

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>News Video</title>
  <style>
    body {{
      margin: 0;
      padding: 0;
      width: {config.width}px;
      height: {config.height}px;
      background: linear-gradient(135deg, {config.gradient_start} 0%, {config.gradient_end} 100%);
      display: flex;
      align-items: center;
      justify-content: center;
      font-family: {config.font_family};
      overflow: hidden;
    }}

    .container {{
      width: 100%;
      height: 100%;
      display: flex;
      align-items: center;
      justify-content: center;
      position: relative;
    }}

    .frame {{
      position: absolute;
      text-align: center;
      color: {config.text_color};
      font-size: {config.font_size}px;
      font-weight: bold;
      text-shadow: 3px 3px 6px rgba(0, 0, 0, 0.5);
      padding: 60px;
      max-width: 90%;
      opacity: 0;
    }}

    .line {{
      margin: 20px 0;
    }}
{animations}
  </style>
</head>
<body>
  <div class="container">
{frame_html}
  </div>
</body>
</html>
"""
