import polars as pl

from datetime import datetime
from typing import Optional, Sequence

from src.filter.models import AvailableBounds, DateRange
from src.utils.logger import logger


log = logger.bind(step="st-helpers")


def format_range(date_range: DateRange, month_abbr: Sequence[str]) -> str:
    """
    Renders a range as "dd MMM - dd MMM yyyy", e.g. "03 jun - 09 jun 2024".
    """
    def _fmt(value: datetime) -> str:
        return f"{value.day:02d} {month_abbr[value.month - 1]}"

    return f"{_fmt(date_range.start)} - {_fmt(date_range.end)} {date_range.end.year}"


def filter_by_range(
        df: pl.DataFrame,
        date_range: Optional[DateRange],
        dt_col: str = "DATE",
    ) -> pl.DataFrame:
    """
    Filters the DataFrame to rows inside the inclusive date range.
    """
    if date_range is None:
        return df

    if df.schema[dt_col] == pl.Date:
        start, end = date_range.start.date(), date_range.end.date()
    else:
        start, end = date_range.start, date_range.end

    filtered = df.filter(pl.col(dt_col).is_between(pl.lit(start), pl.lit(end), closed="both"))
    log.debug(f"Filtered {df.height} rows to {filtered.height} for {start} -> {end}")
    return filtered


def bounds_from_frame(df: pl.DataFrame, dt_col: str = "DATE") -> Optional[AvailableBounds]:
    """Available data extent of `dt_col`, or None when there is no data."""
    if df.is_empty():
        return None

    min_dt, max_dt = df[dt_col].min(), df[dt_col].max()
    if min_dt is None or max_dt is None:
        return None

    if isinstance(min_dt, datetime):
        min_dt, max_dt = min_dt.date(), max_dt.date()
    log.debug(f"Data bounds: {min_dt} - {max_dt}")
    return AvailableBounds(min_date=min_dt, max_date=max_dt)
