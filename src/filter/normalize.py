from datetime import date, datetime, time
from typing import Optional

from src.filter.models import DateRange
from src.utils.logger import logger

log = logger.bind(step="range-normalizer")


def as_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def start_of_day(value: date) -> datetime:
    """
    Midnight at the start of `value`'s calendar day.
    Timezone-aware datetimes keep their tzinfo.
    """
    tzinfo = value.tzinfo if isinstance(value, datetime) else None
    return datetime.combine(as_day(value), time.min, tzinfo=tzinfo)


def end_of_day(value: date) -> datetime:
    """Last representable instant of `value`'s calendar day."""
    tzinfo = value.tzinfo if isinstance(value, datetime) else None
    return datetime.combine(as_day(value), time.max, tzinfo=tzinfo)


def normalize(raw_from: Optional[date], raw_to: Optional[date]) -> Optional[DateRange]:
    """
    Turns a raw calendar pick into a canonical DateRange.

    Returns None while the pick is incomplete (either endpoint unset) and
    when the start day falls after the end day. Reversed picks are never
    swapped.
    """
    if raw_from is None or raw_to is None:
        return None

    if as_day(raw_from) > as_day(raw_to):
        log.warning(f"Rejected reversed pick: {raw_from} > {raw_to}")
        return None

    return DateRange(start=start_of_day(raw_from), end=end_of_day(raw_to))
