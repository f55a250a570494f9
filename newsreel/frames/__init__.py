"""Frame building - split text into timed display units."""

from .builder import build_frames
from .text import clean_text, split_sentences, wrap_text

__all__ = ["build_frames", "clean_text", "split_sentences", "wrap_text"]
