from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class DateRange:
    """
    Canonical, inclusive reporting window.

    `start` is the start-of-day of the first calendar day and `end` the
    end-of-day of the last one.
    """
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"DateRange start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end.date() - self.start.date()).days + 1


@dataclass(frozen=True)
class AvailableBounds:
    """Known extent of the underlying data."""
    min_date: date
    max_date: date

    def __post_init__(self):
        if self.min_date > self.max_date:
            raise ValueError(f"Bounds min {self.min_date} is after max {self.max_date}")


@dataclass(frozen=True)
class Preset:
    label: str
    days: int

    def __post_init__(self):
        if isinstance(self.days, bool) or not isinstance(self.days, int) or self.days < 1:
            raise ValueError(f"Preset '{self.label}' needs a positive day count, got {self.days!r}")


DEFAULT_PRESETS = (
    Preset(label="7 dias", days=7),
    Preset(label="14 dias", days=14),
    Preset(label="30 dias", days=30),
    Preset(label="90 dias", days=90),
)


@dataclass
class PendingSelection:
    """Manual pick in progress. Lives only while the calendar surface is open."""
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def add(self, day: date):
        # Third pick starts over, like a range calendar does
        if self.start is None or self.is_complete:
            self.start, self.end = day, None
        else:
            self.end = day


class SelectionState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    COMMITTED = "committed"
