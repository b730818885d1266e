from .meme import AnimatedMedia, MediaSource, MemeDTO, StaticMedia

__all__ = [
    "AnimatedMedia",
    "MediaSource",
    "MemeDTO",
    "StaticMedia",
]
