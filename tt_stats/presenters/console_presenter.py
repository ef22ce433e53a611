"""Console presenter for CLI output."""

import sys


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)


class ConsoleAcknowledge:
    """Block until the user presses Enter."""

    def __call__(self) -> None:
        try:
            input()
        except EOFError:
            # Closed stdin (piped input) counts as acknowledged
            pass
