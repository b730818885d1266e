from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QMovie, QPixmap
from PyQt6.QtWidgets import QLabel, QSizePolicy
import qtawesome as qta

from devlife.ui.common.theme import Colors, Spacing

logger = logging.getLogger(__name__)


class MediaLabel(QLabel):
    """
    Label that shows one still image or one animation, scaled to fit.

    Holds at most one QMovie; showing anything else stops and releases it.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("memeImage")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setScaledContents(False)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(1, 1)
        self._pixmap: Optional[QPixmap] = None
        self._movie: Optional[QMovie] = None
        self._movie_device = None

    def sizeHint(self) -> QSize:
        return QSize(0, 0)

    def minimumSizeHint(self) -> QSize:
        return QSize(0, 0)

    def show_placeholder(self) -> None:
        self._clear_movie()
        self._pixmap = None
        self.setPixmap(
            qta.icon("fa5s.image", color=Colors.PLACEHOLDER).pixmap(
                Spacing.PLACEHOLDER_ICON, Spacing.PLACEHOLDER_ICON
            )
        )

    def show_pixmap(self, pixmap: QPixmap) -> None:
        self._clear_movie()
        self._pixmap = pixmap
        self._update_scaled()

    def show_movie(self, movie: QMovie, device=None) -> None:
        """Play an animation. ``device`` is kept alive for as long as the movie."""
        self._clear_movie()
        self._pixmap = None
        self._movie = movie
        self._movie_device = device
        self.setMovie(movie)
        self._update_scaled()
        movie.start()

    def _clear_movie(self) -> None:
        if self._movie is None:
            return
        self._movie.stop()
        self.setMovie(None)
        self._movie.deleteLater()
        self._movie = None
        if self._movie_device is not None:
            self._movie_device.close()
            self._movie_device = None

    def _update_scaled(self) -> None:
        target = self.contentsRect().size()
        if target.isEmpty():
            return

        if self._movie is not None:
            frame_size = self._movie.currentImage().size()
            if frame_size.isEmpty():
                return
            scale = min(target.width() / frame_size.width(), target.height() / frame_size.height())
            self._movie.setScaledSize(QSize(
                max(1, int(frame_size.width() * scale)),
                max(1, int(frame_size.height() * scale)),
            ))
            return

        if self._pixmap is not None and not self._pixmap.isNull():
            self.setPixmap(self._pixmap.scaled(
                target,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            ))

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_scaled()
