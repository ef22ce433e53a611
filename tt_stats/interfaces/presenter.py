"""Presenter protocol for output abstraction."""

from typing import Protocol


class PresenterProtocol(Protocol):
    """Interface for presenting output to the user.

    Services and processors report through this protocol so the same
    pipeline can print to a terminal or stay silent in tests.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...
