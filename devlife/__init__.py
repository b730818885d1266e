"""Developers Life Viewer: random developer memes, one at a time."""

__version__ = "1.0.0"
