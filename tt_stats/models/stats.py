"""Data models for typing session statistics."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class StatsRecord:
    """Summary of one completed typing session."""

    timestamp: int  # Seconds since epoch
    wpm: int
    cpm: int
    accuracy: float  # Percentage, usually 0-100
    source_file: str = ""
    session_length: int = 0  # 0 = not recorded


@dataclass(frozen=True)
class MistakeRecord:
    """A single typing error: the expected word and what was typed."""

    word: str
    typed: str


@dataclass(frozen=True)
class DailyBucket:
    """WPM statistics for all sessions completed on one calendar day."""

    day: date
    min_wpm: float
    mean_wpm: float
    max_wpm: float
    sample_count: int


@dataclass
class ReadResult:
    """Validated records from a stats log plus warnings for skipped rows."""

    records: list[StatsRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        """Number of rows that passed validation."""
        return len(self.records)


@dataclass
class TrendChart:
    """A rendered progress chart and the data it was drawn from."""

    min_series: list[float] = field(default_factory=list)
    mean_series: list[float] = field(default_factory=list)
    max_series: list[float] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    caption: str = ""
    total_samples: int = 0
    day_count: int = 0
    text: str = ""
