"""Interface protocols for tt stats."""

from .acknowledge import AcknowledgeCallback
from .presenter import PresenterProtocol

__all__ = ["AcknowledgeCallback", "PresenterProtocol"]
