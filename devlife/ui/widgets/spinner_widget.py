from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import QGraphicsOpacityEffect
import qtawesome as qta

from devlife.ui.common.theme import Colors, Spacing


class SpinnerWidget(qta.IconWidget):
    """Spinning icon shown while the next meme is being fetched."""

    def __init__(self, parent=None, *, size: int = Spacing.SPINNER, color: str = Colors.SPINNER, opacity: float = 0.7):
        super().__init__()
        if parent is not None:
            self.setParent(parent)
        self._running = False
        self._spin = qta.Spin(self, autostart=False)
        self.setIcon(qta.icon("fa5s.spinner", color=color, animation=self._spin))
        self.setIconSize(QSize(size, size))
        self.setFixedSize(size, size)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

        opacity_effect = QGraphicsOpacityEffect(self)
        opacity_effect.setOpacity(opacity)
        self.setGraphicsEffect(opacity_effect)

        self.setVisible(False)

    def set_running(self, running: bool) -> None:
        if running == self._running:
            return
        if running:
            self.start()
        else:
            self.stop()

    def start(self):
        self._running = True
        self.setVisible(True)
        self._spin.start()

    def stop(self):
        self._running = False
        self._spin.stop()
        self.setVisible(False)
