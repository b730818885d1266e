from devlife.core.config import AppConfig
from devlife.core.context import AppContext
from devlife.core.errors import FetchError, HistoryError, RenderError, ViewerError
from devlife.core.navigator import (
    DisplayState,
    NavigatorState,
    RenderResult,
    SessionNavigator,
)

__all__ = [
    "AppConfig",
    "AppContext",
    "DisplayState",
    "FetchError",
    "HistoryError",
    "NavigatorState",
    "RenderError",
    "RenderResult",
    "SessionNavigator",
    "ViewerError",
]
