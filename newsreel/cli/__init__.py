"""Command line interface for newsreel."""
