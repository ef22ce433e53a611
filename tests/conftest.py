"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from tt_stats.config import TTStatsConfig
from tt_stats.models import StatsRecord
from tt_stats.presenters import NullAcknowledge, NullPresenter

# Fixed "now" used by time-dependent tests: noon UTC keeps day math away from midnight
NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def results_dir(tmp_path):
    """Provide a results directory that does not exist yet."""
    return tmp_path / "results"


@pytest.fixture
def test_config(results_dir):
    """Provide a test configuration with temporary paths."""
    return TTStatsConfig(results_dir=results_dir, window_days=30, timezone="UTC")


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def null_acknowledge():
    """Provide an acknowledgment that returns immediately."""
    return NullAcknowledge()


@pytest.fixture
def now():
    """Provide the fixed current time used by time-dependent tests."""
    return NOW


@pytest.fixture
def fixed_clock():
    """Clock returning NOW."""
    return lambda: NOW


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all messages."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)


class RecordingAcknowledge:
    """Acknowledgment that counts how often it was awaited."""

    def __init__(self):
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


@pytest.fixture
def recording_acknowledge():
    """Provide an acknowledgment that records calls for assertion."""
    return RecordingAcknowledge()


@pytest.fixture
def make_record():
    """Factory fixture for creating StatsRecord instances with sensible defaults."""

    def _make(timestamp=None, wpm=80, cpm=400, accuracy=97.5, source_file="", session_length=0):
        return StatsRecord(
            timestamp=int(NOW.timestamp()) if timestamp is None else timestamp,
            wpm=wpm,
            cpm=cpm,
            accuracy=accuracy,
            source_file=source_file,
            session_length=session_length,
        )

    return _make


@pytest.fixture
def write_stats_csv(tmp_path):
    """Factory fixture writing raw CSV lines (header first) to a stats file."""

    def _write(lines, name="words-stats.csv", header="timestamp,wpm,cpm,accuracy"):
        path = tmp_path / name
        content = "\n".join([header, *lines]) + "\n"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
