"""
Session navigator.

Owns the meme history, the cursor into it and the content/error display
state, and mediates every transition between them. The navigator is
UI-agnostic: it talks to a Fetcher and a Renderer through their async
contracts and reports state through plain callbacks.

Everything runs on one asyncio loop (the qasync loop in the app, the
pytest loop in tests), so history and cursor need no locking.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from devlife.core.dto.meme import MemeDTO
from devlife.core.errors import FetchError
from devlife.core.history import SessionHistory

logger = logging.getLogger(__name__)


FETCH_FAILED_MESSAGE = "Failed to load the next meme."


class DisplayState(Enum):
    SHOWING_CONTENT = "content"
    SHOWING_ERROR = "error"


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Outcome of one render invocation: success xor failure."""
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "RenderResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "RenderResult":
        return cls(success=False, error=error)


@dataclass(frozen=True, slots=True)
class NavigatorState:
    """Immutable snapshot handed to the UI after every transition."""
    current: Optional[MemeDTO]
    cursor: Optional[int]
    length: int
    display_state: DisplayState
    can_go_back: bool
    can_go_forward: bool
    fetching: bool


class Fetcher(Protocol):
    async def fetch_random_item(self) -> MemeDTO:
        """Return one random meme or raise FetchError."""


class Renderer(Protocol):
    async def render_item(self, item: MemeDTO) -> RenderResult:
        """Display the meme; resolve exactly once with its outcome."""


# Type aliases
StateChangedCallback = Callable[[NavigatorState], None]
NotificationCallback = Callable[[str], None]


class SessionNavigator:
    """
    Forward/backward navigation over the memes fetched this session.

    Next replays history when the cursor is not at the end, otherwise it
    fetches. Back only replays. Retry refetches when nothing was ever
    loaded, otherwise re-renders the current meme.

    At most one fetch is outstanding: Next/Retry requests that arrive while
    a fetch is pending are ignored. Renders are never cancelled; only the
    most recent render may change the display state.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        renderer: Renderer,
        *,
        on_state_changed: Optional[StateChangedCallback] = None,
        on_notification: Optional[NotificationCallback] = None,
    ):
        self._fetcher = fetcher
        self._renderer = renderer
        self._on_state_changed = on_state_changed
        self._on_notification = on_notification

        self._history = SessionHistory()
        self._display_state = DisplayState.SHOWING_CONTENT
        self._fetching = False
        self._initialized = False
        self._render_token = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def history(self) -> SessionHistory:
        return self._history

    @property
    def display_state(self) -> DisplayState:
        return self._display_state

    @property
    def fetching(self) -> bool:
        return self._fetching

    @property
    def state(self) -> NavigatorState:
        return NavigatorState(
            current=self._history.current,
            cursor=self._history.cursor,
            length=len(self._history),
            display_state=self._display_state,
            can_go_back=self._history.can_go_back,
            can_go_forward=self._history.can_go_forward,
            fetching=self._fetching,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load the first meme. Only the first call has any effect."""
        if self._initialized:
            logger.warning("Navigator already initialized; ignoring")
            return
        self._initialized = True
        logger.info("Session started")
        self._publish()
        await self.advance()

    async def advance(self) -> None:
        """Show the next meme, replaying history before fetching."""
        if self._fetching:
            logger.debug("Next ignored: fetch already in progress")
            return

        if self._history.can_go_forward:
            item = self._history.step_forward()
            logger.info("Replaying meme %s (cursor=%s)", item.id, self._history.cursor)
            self._publish()
            await self._render(item)
            return

        await self._fetch_next()

    async def retreat(self) -> None:
        """Show the previous meme. Does nothing when there is none."""
        if not self._history.can_go_back:
            logger.warning("Back requested at cursor %s; ignoring", self._history.cursor)
            return

        item = self._history.step_back()
        logger.info("Back to meme %s (cursor=%s)", item.id, self._history.cursor)
        self._publish()
        await self._render(item)

    async def retry(self) -> None:
        """Recover from the error page."""
        if self._display_state is not DisplayState.SHOWING_ERROR:
            logger.debug("Retry requested while showing content")

        current = self._history.current
        if current is None:
            logger.info("Retrying first fetch")
            await self.advance()
            return

        logger.info("Retrying render of meme %s", current.id)
        await self._render(current)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch_next(self) -> None:
        self._fetching = True
        self._publish()
        item: Optional[MemeDTO] = None
        try:
            item = await self._fetcher.fetch_random_item()
        except FetchError as e:
            logger.warning("Failed to fetch next meme: %s", e)
            self._notify(FETCH_FAILED_MESSAGE)
            # First load failed: nothing to keep on screen
            if self._history.is_empty:
                self._display_state = DisplayState.SHOWING_ERROR
        finally:
            self._fetching = False

        if item is None:
            self._publish()
            return

        if self._history.is_empty:
            # Leave the first-load error page as soon as there is something to show
            self._display_state = DisplayState.SHOWING_CONTENT
        self._history.append(item)
        logger.info("Fetched meme %s (history=%d)", item.id, len(self._history))
        self._publish()
        await self._render(item)

    async def _render(self, item: MemeDTO) -> RenderResult:
        self._render_token += 1
        token = self._render_token

        result = await self._renderer.render_item(item)

        if token != self._render_token:
            logger.debug("Discarding superseded render result for meme %s", item.id)
            return result

        if result.success:
            self._display_state = DisplayState.SHOWING_CONTENT
        else:
            logger.warning("Render failed for meme %s: %s", item.id, result.error)
            self._display_state = DisplayState.SHOWING_ERROR
        self._publish()
        return result

    def _publish(self) -> None:
        if self._on_state_changed is None:
            return
        try:
            self._on_state_changed(self.state)
        except RuntimeError:
            # Widget was deleted during callback
            pass

    def _notify(self, message: str) -> None:
        if self._on_notification is None:
            return
        try:
            self._on_notification(message)
        except RuntimeError:
            # Widget was deleted during callback
            pass
