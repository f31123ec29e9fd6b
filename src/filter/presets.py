from datetime import datetime, timedelta
from typing import Iterable, Optional

from src.filter.models import DEFAULT_PRESETS, DateRange, Preset
from src.filter.normalize import end_of_day, start_of_day
from src.utils.logger import logger

log = logger.bind(step="preset-resolver")


def resolve(days: int, now: datetime) -> DateRange:
    """
    Trailing window of `days` calendar days ending yesterday.

    Today is never included so partial same-day data stays out of reports.
    A 7 day preset covers yesterday and the six days before it.
    """
    if days < 1:
        raise ValueError(f"Preset window needs at least one day, got {days}")

    end = end_of_day(now - timedelta(days=1))
    start = start_of_day(end - timedelta(days=days - 1))
    log.debug(f"Resolved {days}d preset at {now}: {start} -> {end}")
    return DateRange(start=start, end=end)


def load_presets(entries: Optional[Iterable[dict]]) -> tuple[Preset, ...]:
    """Build the ordered preset catalog from config entries."""
    if not entries:
        return DEFAULT_PRESETS

    presets = tuple(Preset(label=str(e["label"]), days=e["days"]) for e in entries)

    seen = set()
    for preset in presets:
        if preset.days in seen:
            raise ValueError(f"Duplicate preset for {preset.days} days")
        seen.add(preset.days)

    log.debug(f"Loaded {len(presets)} presets: {[p.days for p in presets]}")
    return presets
