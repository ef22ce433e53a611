"""Null presenter for testing (no output)."""


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass


class NullAcknowledge:
    """Acknowledgment that returns immediately (testing)."""

    def __call__(self) -> None:
        pass
