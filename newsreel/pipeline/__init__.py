"""Pipeline module for orchestrating video generation."""

from .generator import MISSING_INPUT_MESSAGE, VideoGenerator

__all__ = ["MISSING_INPUT_MESSAGE", "VideoGenerator"]
