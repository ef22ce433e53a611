"""Append-only CSV logs of typing session results and mistakes."""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from tt_stats.exceptions import StatsWriteError
from tt_stats.models.stats import MistakeRecord
from tt_stats.utils.file_utils import ensure_directory

logger = logging.getLogger(__name__)

STATS_HEADER = ["timestamp", "wpm", "cpm", "accuracy"]
MISTAKES_HEADER = ["timestamp", "word", "error"]


class StatsLogWriter:
    """Append session rows to per-test-type CSV logs.

    Each test type gets two files in the results directory:
    - ``<type>-stats.csv``: one row per completed session
    - ``<type>-errors.csv``: one row per mistake, only created once a
      session actually had a mistake

    Files are only ever opened in append mode. A crash can leave a
    truncated last line but never touches rows already written.
    """

    def __init__(self, results_dir: Path):
        """Initialize the writer.

        Args:
            results_dir: Directory holding the CSV logs (created on first write)
        """
        self.results_dir = results_dir

    def stats_path(self, test_type: str) -> Path:
        return self.results_dir / f"{test_type}-stats.csv"

    def mistakes_path(self, test_type: str) -> Path:
        return self.results_dir / f"{test_type}-errors.csv"

    def record_session(
        self,
        test_type: str,
        timestamp: int,
        wpm: int,
        cpm: int,
        accuracy: float,
        source_file: str | None = None,
        session_length: int | None = None,
    ) -> Path:
        """Append one completed session to the stats log.

        The optional ``source_file`` and ``session_length`` columns are only
        written when at least one of them is given; older readers simply see
        the first four columns.

        Args:
            test_type: Log name, e.g. "words" or "quotes"
            timestamp: Session completion time in seconds since epoch
            wpm: Words per minute
            cpm: Characters per minute
            accuracy: Accuracy percentage (written with two decimals)
            source_file: Optional text source used for the session
            session_length: Optional number of words/lines requested

        Returns:
            Path of the stats log

        Raises:
            StatsWriteError: If the log cannot be created or appended to
        """
        row = [str(timestamp), str(wpm), str(cpm), f"{accuracy:.2f}"]
        if source_file is not None or session_length is not None:
            row.append(source_file or "")
            row.append("" if session_length is None else str(session_length))

        path = self.stats_path(test_type)
        self._append_rows(path, STATS_HEADER, [row])
        logger.debug(f"Recorded {test_type} session at {timestamp}: {wpm} WPM")
        return path

    def record_mistakes(
        self,
        test_type: str,
        timestamp: int,
        mistakes: Iterable[MistakeRecord],
    ) -> Path | None:
        """Append one row per mistake to the mistakes log.

        An empty mistake set writes nothing and does not create the file,
        so the file only exists once at least one mistake was ever made.

        Args:
            test_type: Log name, e.g. "words" or "quotes"
            timestamp: Session completion time in seconds since epoch
            mistakes: Mistakes made during the session

        Returns:
            Path of the mistakes log, or None if there was nothing to write

        Raises:
            StatsWriteError: If the log cannot be created or appended to
        """
        rows = [[str(timestamp), m.word, m.typed] for m in mistakes]
        if not rows:
            return None

        path = self.mistakes_path(test_type)
        self._append_rows(path, MISTAKES_HEADER, rows)
        logger.debug(f"Recorded {len(rows)} {test_type} mistakes at {timestamp}")
        return path

    def _append_rows(self, path: Path, header: list[str], rows: list[list[str]]) -> None:
        needs_header = not path.exists()
        try:
            ensure_directory(path.parent)
            with path.open("a", newline="", encoding="utf-8") as f:
                writer = csv.writer(f, lineterminator="\n")
                quote_all = csv.writer(f, lineterminator="\n", quoting=csv.QUOTE_ALL)
                if needs_header:
                    writer.writerow(header)
                for row in rows:
                    # Older csv versions only quote line breaks found in the lineterminator
                    if any("\r" in value for value in row):
                        quote_all.writerow(row)
                    else:
                        writer.writerow(row)
        except OSError as e:
            raise StatsWriteError(f"Could not write to {path}: {e}") from e


def record_session_safely(writer: StatsLogWriter, test_type: str, *args, **kwargs) -> bool:
    """Record a session, logging instead of raising on I/O failure.

    For use at the end of an interactive session, where a failed write
    must be reported but must not crash the program.

    Returns:
        True if the row was written
    """
    try:
        writer.record_session(test_type, *args, **kwargs)
        return True
    except StatsWriteError as e:
        logger.warning(f"Session result not saved: {e}")
        return False
