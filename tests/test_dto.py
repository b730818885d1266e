"""Unit tests for the meme DTO and its media variant."""

from __future__ import annotations

import pytest

from devlife.core.dto.meme import AnimatedMedia, MemeDTO, StaticMedia


def test_media_prefers_gif():
    meme = MemeDTO(id="1", description="d", gif_url="https://x/a.gif", preview_url="https://x/a.jpg")
    assert meme.media == AnimatedMedia("https://x/a.gif")


def test_media_falls_back_to_preview():
    meme = MemeDTO(id="1", description="d", gif_url=None, preview_url="https://x/a.jpg")
    assert meme.media == StaticMedia("https://x/a.jpg")


def test_dto_is_immutable():
    meme = MemeDTO(id="1", description="d", gif_url=None, preview_url="u1")
    with pytest.raises(AttributeError):
        meme.description = "changed"


def test_from_payload_builds_dto():
    meme = MemeDTO.from_payload(
        {"id": 42, "description": "A", "gif_url": None, "preview_url": "u1"}
    )
    assert meme == MemeDTO(id="42", description="A", gif_url=None, preview_url="u1")


def test_from_payload_treats_blank_gif_as_absent():
    meme = MemeDTO.from_payload({"id": "1", "description": "A", "gif_url": "", "preview_url": "u1"})
    assert meme.gif_url is None
    assert isinstance(meme.media, StaticMedia)


def test_from_payload_missing_description_is_empty():
    meme = MemeDTO.from_payload({"id": "1", "preview_url": "u1"})
    assert meme.description == ""


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "A", "preview_url": "u1"},
        {"id": "", "description": "A", "preview_url": "u1"},
        {"id": "1", "description": "A"},
        {"id": "1", "description": "A", "preview_url": None},
    ],
)
def test_from_payload_rejects_missing_required_fields(payload):
    with pytest.raises(ValueError):
        MemeDTO.from_payload(payload)
