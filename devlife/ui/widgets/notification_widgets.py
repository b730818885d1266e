"""
Transient notifications for non-blocking user feedback.
"""
from typing import Callable, Optional

from PyQt6.QtCore import Qt, QTimer, QPropertyAnimation, QRectF
from PyQt6.QtGui import QPainter, QColor, QPainterPath, QPen
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel
import qtawesome as qta

from devlife.ui.common.theme import Colors, Fonts, Spacing

# level -> (icon, icon color)
TOAST_LEVELS = {
    "info": ("fa5s.info-circle", Colors.ACCENT_SECONDARY),
    "error": ("fa5s.exclamation-circle", Colors.ACCENT_ERROR),
}

FADE_MS = 250


class ToastNotification(QWidget):
    """
    Frameless toast pinned above the navigation row of its parent window.

    A new message replaces the visible one and restarts the hide timer, so
    repeated fetch failures never stack up.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toastNotification")
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.ToolTip |
            Qt.WindowType.WindowStaysOnTopHint
        )
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.hide()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(Spacing.LG, Spacing.MD, Spacing.LG, Spacing.MD)
        layout.setSpacing(Spacing.MD)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(Spacing.ICON_LG, Spacing.ICON_LG)
        layout.addWidget(self.icon_label)

        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(
            f"color: {Colors.TEXT_PRIMARY}; font-size: {Fonts.SIZE_LG}px; background: transparent;"
        )
        layout.addWidget(self.message_label, 1)

        self.hide_timer = QTimer(self)
        self.hide_timer.setSingleShot(True)
        self.hide_timer.timeout.connect(self._fade_out)

        self.fade_animation = QPropertyAnimation(self, b"windowOpacity")
        self.fade_animation.setDuration(FADE_MS)

    @property
    def message(self) -> str:
        return self.message_label.text()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        path = QPainterPath()
        path.addRoundedRect(
            QRectF(0.5, 0.5, self.width() - 1, self.height() - 1),
            Spacing.RADIUS_XL, Spacing.RADIUS_XL,
        )
        painter.fillPath(path, QColor(Colors.BG_TERTIARY))
        painter.setPen(QPen(QColor(Colors.BORDER_DEFAULT), 1))
        painter.drawPath(path)

    def show_message(self, message: str, *, level: str = "info", duration: int = 2000):
        """
        Show ``message`` for ``duration`` milliseconds.

        ``level`` picks the icon: "info" or "error".
        """
        icon_name, icon_color = TOAST_LEVELS.get(level, TOAST_LEVELS["info"])
        self.hide_timer.stop()

        self.message_label.setText(message)
        self.icon_label.setPixmap(
            qta.icon(icon_name, color=icon_color).pixmap(Spacing.ICON_LG, Spacing.ICON_LG)
        )
        self.adjustSize()
        self._reposition()

        self.setWindowOpacity(0)
        self.show()
        self._fade(0.0, 1.0)
        self.hide_timer.start(duration)

    def _reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        origin = parent.mapToGlobal(parent.rect().topLeft())
        x = origin.x() + (parent.width() - self.width()) // 2
        y = origin.y() + parent.height() - self.height() - Spacing.NAV_BUTTON - Spacing.XXL * 2
        self.move(x, y)

    def _fade_out(self):
        self._fade(1.0, 0.0, on_finished=self.hide)

    def _fade(self, start: float, end: float, on_finished: Optional[Callable[[], None]] = None) -> None:
        self.fade_animation.stop()
        try:
            self.fade_animation.finished.disconnect()
        except TypeError:
            pass  # nothing connected
        if on_finished is not None:
            self.fade_animation.finished.connect(on_finished)
        self.fade_animation.setStartValue(start)
        self.fade_animation.setEndValue(end)
        self.fade_animation.start()
