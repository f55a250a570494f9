"""FastAPI backend for the video generation endpoint."""
