"""
Error taxonomy shared by the core and the UI.

None of these are fatal: the navigator turns them into a toast or the
error page, and the user recovers through Next / Retry.
"""


class ViewerError(RuntimeError):
    """Base class for recoverable viewer errors."""


class FetchError(ViewerError):
    """Raised when the next meme description cannot be fetched or decoded."""


class RenderError(ViewerError):
    """Raised when a meme's media cannot be downloaded or decoded."""


class HistoryError(ViewerError):
    """Raised when a history move is requested that its cursor cannot make."""
