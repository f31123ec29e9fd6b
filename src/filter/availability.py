from datetime import date, timedelta
from typing import Optional

from src.filter.models import AvailableBounds
from src.filter.normalize import as_day


def is_selectable(
        day: date,
        bounds: Optional[AvailableBounds],
        today: date,
        respect_max: bool = False,
    ) -> bool:
    """
    Whether `day` may be picked on the calendar.

    Today and anything after it are always excluded. `bounds.min_date` is the
    lower limit when bounds are known; without bounds any past day is fine.
    `bounds.max_date` is ignored unless `respect_max` is set, since the
    today/future exclusion already caps the window at yesterday.
    """
    candidate = as_day(day)
    if candidate >= as_day(today):
        return False
    if bounds is None:
        return True
    if candidate < as_day(bounds.min_date):
        return False
    if respect_max and candidate > as_day(bounds.max_date):
        return False
    return True


def selectable_window(
        bounds: Optional[AvailableBounds],
        today: date,
        respect_max: bool = False,
    ) -> tuple[Optional[date], date]:
    """
    First and last selectable days, for widgets that take min/max limits
    instead of a per-day predicate. First is None when there is no lower bound.
    The last day can precede the first when bounds start today or later.
    """
    last = as_day(today) - timedelta(days=1)
    if bounds is None:
        return None, last
    if respect_max:
        last = min(last, as_day(bounds.max_date))
    return as_day(bounds.min_date), last
