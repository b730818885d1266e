"""
Rounded-corner clipping for the meme image.
"""
from PyQt6.QtWidgets import QGraphicsEffect
from PyQt6.QtGui import QPainter, QPainterPath
from PyQt6.QtCore import Qt, QPoint, QRectF


class RoundedCornerGraphicsEffect(QGraphicsEffect):
    """Clips the source widget (still or animated media) to a rounded rect."""

    def __init__(self, radius: float, parent=None):
        super().__init__(parent)
        self._radius = float(radius)

    def draw(self, painter: QPainter):
        # In PyQt6, sourcePixmap returns (pixmap, offset)
        src, offset = self.sourcePixmap(Qt.CoordinateSystem.LogicalCoordinates)
        if offset is None:
            offset = QPoint()
        if src.isNull():
            return

        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        path = QPainterPath()
        path.addRoundedRect(QRectF(0, 0, src.width(), src.height()), self._radius, self._radius)

        painter.setClipPath(path, Qt.ClipOperation.IntersectClip)
        painter.drawPixmap(offset, src)
