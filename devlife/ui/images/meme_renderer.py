"""
Meme renderer.

One polymorphic render path for both media variants: download the bytes,
decode them with the variant's decoder, then apply the decoded media to
the label through a single shared continuation.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Type

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice
from PyQt6.QtGui import QMovie, QPixmap
from PyQt6.QtWidgets import QLabel

from devlife.core.dto.meme import AnimatedMedia, MediaSource, MemeDTO, StaticMedia
from devlife.core.errors import RenderError
from devlife.core.media_loader import MediaLoader
from devlife.core.navigator import RenderResult
from devlife.ui.images.media_label import MediaLabel

logger = logging.getLogger(__name__)


class StillFrame:
    """Decoded static image."""

    def __init__(self, pixmap: QPixmap):
        self.pixmap = pixmap

    def apply(self, label: MediaLabel) -> None:
        label.show_pixmap(self.pixmap)

    def discard(self) -> None:
        pass


class Animation:
    """Decoded animation plus the in-memory device it reads from."""

    def __init__(self, movie: QMovie, device: QBuffer):
        self.movie = movie
        self.device = device

    def apply(self, label: MediaLabel) -> None:
        label.show_movie(self.movie, self.device)

    def discard(self) -> None:
        self.movie.deleteLater()
        self.device.close()


def decode_static(data: bytes) -> StillFrame:
    pixmap = QPixmap()
    if not pixmap.loadFromData(data) or pixmap.isNull():
        raise RenderError("Could not decode image")
    return StillFrame(pixmap)


def decode_animated(data: bytes) -> Animation:
    device = QBuffer()
    device.setData(QByteArray(data))
    if not device.open(QIODevice.OpenModeFlag.ReadOnly):
        raise RenderError("Could not open animation buffer")
    movie = QMovie(device, QByteArray())
    movie.setCacheMode(QMovie.CacheMode.CacheAll)
    if not movie.isValid() or not movie.jumpToFrame(0):
        movie.deleteLater()
        device.close()
        raise RenderError("Could not decode animation")
    return Animation(movie, device)


DECODERS: Dict[Type[MediaSource], Callable[[bytes], object]] = {
    AnimatedMedia: decode_animated,
    StaticMedia: decode_static,
}


class MemeRenderer:
    """
    Displays a meme in the content page widgets.

    Every call resolves exactly once. A newer call supersedes older ones:
    their results are still returned, but only the latest call's media
    ever reaches the label.
    """

    def __init__(self, loader: MediaLoader, media_label: MediaLabel, description_label: QLabel):
        self._loader = loader
        self._media_label = media_label
        self._description_label = description_label
        self._token = 0

    async def render_item(self, item: MemeDTO) -> RenderResult:
        self._token += 1
        token = self._token

        source = item.media
        self._description_label.setText(item.description)
        self._media_label.show_placeholder()
        logger.debug("Rendering meme %s from %s", item.id, source)

        try:
            data = await self._loader.load(source.url)
            decoded = DECODERS[type(source)](data)
        except RenderError as e:
            logger.warning("Media load failed for %s: %s", source.url, e)
            return RenderResult.failed(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error rendering meme {item.id}: {e}")
            return RenderResult.failed(str(e) or type(e).__name__)

        return self._apply(token, decoded)

    def _apply(self, token: int, decoded) -> RenderResult:
        if token != self._token:
            decoded.discard()
            logger.debug("Dropping superseded media (token %d, current %d)", token, self._token)
            return RenderResult.ok()
        decoded.apply(self._media_label)
        return RenderResult.ok()
