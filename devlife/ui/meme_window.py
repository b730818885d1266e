"""
Main (and only) window: one meme at a time with Back / Next navigation.

The window owns no navigation state. It builds the renderer widgets,
hands them to a SessionNavigator, and redraws itself from the
NavigatorState snapshots the navigator publishes.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Set

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QPushButton, QStackedWidget, QVBoxLayout, QWidget
)
import qtawesome as qta

from devlife.core.context import AppContext
from devlife.core.navigator import DisplayState, NavigatorState, SessionNavigator
from devlife.ui.common.theme import Colors, Fonts, Spacing, Styles
from devlife.ui.images import MediaLabel, MemeRenderer
from devlife.ui.widgets import RoundedCornerGraphicsEffect, SpinnerWidget, ToastNotification

logger = logging.getLogger(__name__)

CONTENT_PAGE = 0
ERROR_PAGE = 1


class MemeWindow(QMainWindow):
    """Single-screen meme viewer."""

    def __init__(self, core: AppContext, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._core = core
        self._config = core.config
        self._tasks: Set[asyncio.Future] = set()

        self.setWindowTitle("Developers Life")
        self.resize(*self._config.window_size)

        self._setup_ui()

        self._renderer = MemeRenderer(core.media_loader, self.media_label, self.description_label)
        self.navigator = SessionNavigator(
            core.fetcher,
            self._renderer,
            on_state_changed=self._apply_state,
            on_notification=self._show_notification,
        )
        self._apply_state(self.navigator.state)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        root = QWidget()
        root.setObjectName("memeWindow")
        root.setStyleSheet(Styles.WINDOW)
        self.setCentralWidget(root)

        layout = QVBoxLayout(root)
        layout.setContentsMargins(Spacing.XL, Spacing.XL, Spacing.XL, Spacing.XL)
        layout.setSpacing(Spacing.LG)

        self.page_stack = QStackedWidget()
        self.page_stack.addWidget(self._build_content_page())
        self.page_stack.addWidget(self._build_error_page())
        layout.addWidget(self.page_stack, 1)
        layout.addLayout(self._build_nav_row())

        self.toast = ToastNotification(self)

        self.back_shortcut = QShortcut(QKeySequence(Qt.Key.Key_Left), self)
        self.back_shortcut.activated.connect(self._on_back_clicked)
        self.next_shortcut = QShortcut(QKeySequence(Qt.Key.Key_Right), self)
        self.next_shortcut.activated.connect(self._on_next_clicked)

    def _build_content_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.LG)

        self.media_label = MediaLabel()
        self.media_label.setStyleSheet(Styles.MEDIA_WELL)
        self.media_label.setGraphicsEffect(
            RoundedCornerGraphicsEffect(self._config.media_border_radius, self.media_label)
        )
        layout.addWidget(self.media_label, 1)

        self.description_label = QLabel()
        self.description_label.setObjectName("memeDescription")
        self.description_label.setWordWrap(True)
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)
        self.description_label.setStyleSheet(Styles.label(size=Fonts.SIZE_XL))
        layout.addWidget(self.description_label)
        return page

    def _build_nav_row(self) -> QHBoxLayout:
        nav_row = QHBoxLayout()
        nav_row.setSpacing(Spacing.XXL)
        nav_row.addStretch()

        self.back_button = self._make_nav_button("fa5s.arrow-left", "Back")
        self.back_button.clicked.connect(self._on_back_clicked)
        nav_row.addWidget(self.back_button)

        self.spinner = SpinnerWidget()
        nav_row.addWidget(self.spinner)

        self.next_button = self._make_nav_button("fa5s.arrow-right", "Next")
        self.next_button.clicked.connect(self._on_next_clicked)
        nav_row.addWidget(self.next_button)

        nav_row.addStretch()
        return nav_row

    def _build_error_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()

        icon = QLabel()
        icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        icon.setPixmap(
            qta.icon("fa5s.exclamation-triangle", color=Colors.ACCENT_ERROR).pixmap(
                Spacing.PLACEHOLDER_ICON, Spacing.PLACEHOLDER_ICON
            )
        )
        layout.addWidget(icon)

        self.error_label = QLabel("Could not load the meme.\nCheck your connection and try again.")
        self.error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.error_label.setStyleSheet(Styles.label(color=Colors.TEXT_SECONDARY, size=Fonts.SIZE_LG))
        layout.addWidget(self.error_label)

        self.retry_button = QPushButton("Retry")
        self.retry_button.setIcon(qta.icon("fa5s.redo", color=Colors.TEXT_WHITE))
        self.retry_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.retry_button.setStyleSheet(Styles.button_primary())
        self.retry_button.clicked.connect(self._on_retry_clicked)
        layout.addWidget(self.retry_button, 0, Qt.AlignmentFlag.AlignHCenter)

        layout.addStretch()
        return page

    @staticmethod
    def _make_nav_button(icon_name: str, tooltip: str) -> QPushButton:
        button = QPushButton()
        button.setIcon(qta.icon(icon_name, color=Colors.TEXT_WHITE))
        button.setIconSize(QSize(Spacing.ICON_LG, Spacing.ICON_LG))
        button.setFixedSize(Spacing.NAV_BUTTON, Spacing.NAV_BUTTON)
        button.setToolTip(tooltip)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        button.setStyleSheet(Styles.nav_button(True))
        return button

    # ------------------------------------------------------------------
    # Navigator wiring
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Kick off the first fetch. Call once the event loop is running."""
        self._spawn(self.navigator.initialize())

    def _apply_state(self, state: NavigatorState) -> None:
        page = ERROR_PAGE if state.display_state is DisplayState.SHOWING_ERROR else CONTENT_PAGE
        self.page_stack.setCurrentIndex(page)

        self.back_button.setEnabled(state.can_go_back)
        self.back_button.setStyleSheet(Styles.nav_button(state.can_go_back))

        self.next_button.setEnabled(not state.fetching)
        self.next_button.setStyleSheet(Styles.nav_button(not state.fetching))
        self.retry_button.setEnabled(not state.fetching)
        self.retry_button.setText("Loading..." if state.fetching else "Retry")
        self.spinner.set_running(state.fetching)

        logger.debug(
            "State: page=%s cursor=%s/%d back=%s fetching=%s",
            page, state.cursor, state.length, state.can_go_back, state.fetching,
        )

    def _show_notification(self, message: str) -> None:
        self.toast.show_message(message, level="error", duration=self._config.notification_duration_ms)

    def _on_back_clicked(self) -> None:
        if self.back_button.isEnabled():
            self._spawn(self.navigator.retreat())

    def _on_next_clicked(self) -> None:
        if self.next_button.isEnabled():
            self._spawn(self.navigator.advance())

    def _on_retry_clicked(self) -> None:
        if self.retry_button.isEnabled():
            self._spawn(self.navigator.retry())

    def _spawn(self, coro) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Navigation task failed: %s", exc, exc_info=exc)
            self._apply_state(self.navigator.state)

    def closeEvent(self, event) -> None:
        for task in list(self._tasks):
            task.cancel()
        self.toast.hide()
        super().closeEvent(event)
