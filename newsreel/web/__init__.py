"""Web interface for Newsreel.

This package provides a FastAPI backend and a single-page form
for generating animated news videos.

Usage:
    python -m newsreel.web [--port 8000] [--host 127.0.0.1]
"""
