"""Meme media display."""

from .media_label import MediaLabel
from .meme_renderer import MemeRenderer

__all__ = [
    'MediaLabel',
    'MemeRenderer',
]
