"""Presenter implementations for output handling."""

from .console_presenter import ConsoleAcknowledge, ConsolePresenter
from .null_presenter import NullAcknowledge, NullPresenter

__all__ = [
    "ConsolePresenter",
    "ConsoleAcknowledge",
    "NullPresenter",
    "NullAcknowledge",
]
