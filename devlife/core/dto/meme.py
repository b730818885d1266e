from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True, slots=True)
class AnimatedMedia:
    url: str


@dataclass(frozen=True, slots=True)
class StaticMedia:
    url: str


MediaSource = Union[AnimatedMedia, StaticMedia]


@dataclass(frozen=True, slots=True)
class MemeDTO:
    id: str
    description: str
    gif_url: Optional[str]      # animated variant, if the platform has one
    preview_url: str            # always present

    @property
    def media(self) -> MediaSource:
        """The media to display: the GIF when there is one, else the preview."""
        if self.gif_url:
            return AnimatedMedia(self.gif_url)
        return StaticMedia(self.preview_url)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MemeDTO":
        """
        Build a DTO from a normalized payload (see DevelopersLifeClient.normalize_meme).

        Raises:
            ValueError: if a required field is missing or empty
        """
        meme_id = payload.get("id")
        preview_url = payload.get("preview_url")
        if meme_id is None or str(meme_id) == "":
            raise ValueError("meme payload has no id")
        if not preview_url:
            raise ValueError(f"meme {meme_id} has no preview url")
        return cls(
            id=str(meme_id),
            description=str(payload.get("description") or ""),
            gif_url=payload.get("gif_url") or None,
            preview_url=str(preview_url),
        )
