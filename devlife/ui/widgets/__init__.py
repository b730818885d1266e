"""Reusable UI widgets."""

from .notification_widgets import ToastNotification
from .spinner_widget import SpinnerWidget
from .rounded_effect import RoundedCornerGraphicsEffect

__all__ = [
    'ToastNotification',
    'SpinnerWidget',
    'RoundedCornerGraphicsEffect',
]
