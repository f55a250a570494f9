"""Animation rendering - frames to a looping HTML document."""

from .animation import render_document, render_keyframes
from .encoding import DATA_URI_PREFIX, from_data_uri, to_data_uri
from .timing import compute_windows, total_duration

__all__ = [
    "DATA_URI_PREFIX",
    "compute_windows",
    "from_data_uri",
    "render_document",
    "render_keyframes",
    "to_data_uri",
    "total_duration",
]
