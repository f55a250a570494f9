"""Newsreel: turn a news article or plain text into an animated HTML video.

The pipeline extracts text, splits it into timed frames and renders the
frames as a looping CSS keyframe animation packaged as a data URI.
"""

__version__ = "0.1.0"
