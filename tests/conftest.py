import asyncio
import os
from typing import Dict, List, Optional, Sequence, Union

import pytest

from devlife.core.dto.meme import MemeDTO
from devlife.core.errors import FetchError
from devlife.core.navigator import NavigatorState, RenderResult, SessionNavigator


def make_meme(meme_id: str = "1", description: str = "A", gif_url: Optional[str] = None,
              preview_url: Optional[str] = None) -> MemeDTO:
    return MemeDTO(
        id=meme_id,
        description=description,
        gif_url=gif_url,
        preview_url=preview_url or f"https://static.example/{meme_id}.jpg",
    )


class FakeFetcher:
    """Returns queued memes / raises queued errors; optionally waits on a gate first."""

    def __init__(self, results: Sequence[Union[MemeDTO, Exception]] = (), *, gate: Optional[asyncio.Event] = None):
        self.results: List[Union[MemeDTO, Exception]] = list(results)
        self.gate = gate
        self.calls = 0
        self._auto_id = 1000

    async def fetch_random_item(self) -> MemeDTO:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.results:
            result = self.results.pop(0)
        else:
            self._auto_id += 1
            result = make_meme(str(self._auto_id))
        if isinstance(result, Exception):
            raise result
        return result


class FakeRenderer:
    """Records render calls; outcome and optional gate are fixed per call index."""

    def __init__(self, outcomes: Sequence[RenderResult] = ()):
        self.outcomes: List[RenderResult] = list(outcomes)
        self.gates: Dict[int, asyncio.Event] = {}
        self.rendered: List[MemeDTO] = []

    async def render_item(self, item: MemeDTO) -> RenderResult:
        index = len(self.rendered)
        self.rendered.append(item)
        outcome = self.outcomes.pop(0) if self.outcomes else RenderResult.ok()
        gate = self.gates.get(index)
        if gate is not None:
            await gate.wait()
        return outcome


class StateRecorder:
    def __init__(self):
        self.states: List[NavigatorState] = []
        self.notifications: List[str] = []

    def on_state(self, state: NavigatorState) -> None:
        self.states.append(state)

    def on_notification(self, message: str) -> None:
        self.notifications.append(message)

    @property
    def last(self) -> NavigatorState:
        return self.states[-1]


def fetch_error(message: str = "boom") -> FetchError:
    return FetchError(message)


@pytest.fixture
def recorder() -> StateRecorder:
    return StateRecorder()


@pytest.fixture
def build_navigator(recorder):
    def _build(fetcher: FakeFetcher, renderer: Optional[FakeRenderer] = None) -> SessionNavigator:
        return SessionNavigator(
            fetcher,
            renderer or FakeRenderer(),
            on_state_changed=recorder.on_state,
            on_notification=recorder.on_notification,
        )
    return _build


@pytest.fixture(scope="session")
def qapp():
    """One offscreen QApplication shared by the widget tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
