"""Tolerant reader for typing session stats logs."""

import csv
import logging
import re
from pathlib import Path

from tt_stats.exceptions import LogNotFoundError, StatsReadError
from tt_stats.models.stats import ReadResult, StatsRecord

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

MIN_FIELDS = 4


class RowError(ValueError):
    """A mandatory column failed to parse; the message is the skip reason."""


def parse_int(value: str) -> int:
    """Parse a strict signed decimal 64-bit integer.

    Unlike ``int()``, surrounding whitespace and digit separators are
    rejected.

    Raises:
        ValueError: If the value is not a decimal integer in int64 range
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def parse_float(value: str) -> float:
    """Parse a floating-point number, rejecting padding and digit separators.

    Raises:
        ValueError: If the value is not a float literal
    """
    if not value or value != value.strip() or "_" in value:
        raise ValueError(f"invalid float: {value!r}")
    return float(value)


class StatsLogReader:
    """Parse a stats CSV into validated records.

    The first row is always treated as a header. Every other row either
    becomes a StatsRecord or is skipped with a warning; one bad row never
    prevents the rest of the history from loading.

    Mandatory columns (timestamp, wpm, cpm, accuracy) are validated loudly.
    The optional source file and session length columns are advisory and
    degrade silently to empty values.
    """

    def read_records(self, path: Path) -> ReadResult:
        """Read all valid records from a stats log.

        Args:
            path: Path to the ``<type>-stats.csv`` file

        Returns:
            ReadResult with records in file order and one warning per
            skipped row

        Raises:
            LogNotFoundError: If the file does not exist
            StatsReadError: If the file exists but cannot be read
        """
        result = ReadResult()
        try:
            with path.open("r", newline="", encoding="utf-8", errors="replace") as f:
                rows = csv.reader(f)
                while True:
                    # A quoted field may span lines; report where the row starts
                    line_number = rows.line_num + 1
                    try:
                        row = next(rows)
                    except StopIteration:
                        break
                    except csv.Error:
                        row = None
                    if line_number == 1:
                        continue  # Header, whatever it contains
                    self._parse_row_into(row, line_number, result)
        except FileNotFoundError as e:
            raise LogNotFoundError(f"Stats log not found: {path}") from e
        except OSError as e:
            raise StatsReadError(f"Could not read stats log {path}: {e}") from e

        logger.info(
            f"Read {result.record_count} records from {path} ({len(result.warnings)} skipped)"
        )
        return result

    def _parse_row_into(self, row: list[str] | None, line_number: int, result: ReadResult) -> None:
        """Append the parsed row to ``result``, or a warning if it is invalid.

        ``row`` is None when the csv module itself rejected the row.
        """
        try:
            if row is None:
                raise RowError("malformed CSV")
            record = self.parse_row(row)
        except RowError as e:
            warning = f"Skipping invalid record at line {line_number} ({e})"
            logger.debug(warning)
            result.warnings.append(warning)
            return
        result.records.append(record)

    @staticmethod
    def parse_row(row: list[str]) -> StatsRecord:
        """Convert one CSV row into a StatsRecord.

        Raises:
            RowError: With the skip reason if a mandatory column is invalid
        """
        if len(row) < MIN_FIELDS:
            raise RowError("insufficient fields")

        try:
            timestamp = parse_int(row[0])
        except ValueError:
            raise RowError("bad timestamp") from None
        try:
            wpm = parse_int(row[1])
        except ValueError:
            raise RowError("bad WPM") from None
        try:
            cpm = parse_int(row[2])
        except ValueError:
            raise RowError("bad CPM") from None
        try:
            accuracy = parse_float(row[3])
        except ValueError:
            raise RowError("bad accuracy") from None

        source_file = row[4] if len(row) > 4 else ""
        session_length = 0
        if len(row) > 5 and row[5]:
            try:
                session_length = parse_int(row[5])
            except ValueError:
                pass  # Advisory column, left at zero

        return StatsRecord(
            timestamp=timestamp,
            wpm=wpm,
            cpm=cpm,
            accuracy=accuracy,
            source_file=source_file,
            session_length=session_length,
        )
