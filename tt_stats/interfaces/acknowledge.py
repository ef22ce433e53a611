"""Acknowledgment protocol for the end-of-chart pause."""

from typing import Protocol


class AcknowledgeCallback(Protocol):
    """A blocking "wait until the user is done looking" step.

    The renderer calls this exactly once after drawing. Console
    implementations block on input; test implementations return immediately.
    """

    def __call__(self) -> None:
        """Block until the user acknowledges."""
        ...
