# src/app/components/date_filter.py
import streamlit as st
from datetime import datetime
from typing import Optional

from src.filter.availability import selectable_window
from src.filter.models import AvailableBounds, DateRange
from src.filter.presets import resolve
from src.filter.selection import DateSelector
from src.app.utils.helpers import format_range
from src.utils.config import DateFilterConfig
from src.utils.logger import logger

log = logger.bind(step="st-date-filter")

RANGE_KEY = "date_range"
SELECTOR_KEY = "date_selector"
CALENDAR_KEY = "date_filter_calendar"


def _commit_to_session(date_range: DateRange):
    st.session_state[RANGE_KEY] = date_range
    log.debug(f"Session range updated: {date_range}")


def _get_selector(bounds: Optional[AvailableBounds], config: DateFilterConfig) -> DateSelector:
    """One selector per session; bounds are refreshed on every rerun."""
    if SELECTOR_KEY not in st.session_state:
        st.session_state[SELECTOR_KEY] = DateSelector(
            on_commit=_commit_to_session,
            respect_max_bound=config.respect_max_bound,
        )
    selector: DateSelector = st.session_state[SELECTOR_KEY]
    selector.available_bounds = bounds
    return selector


def _on_calendar_change():
    selector: DateSelector = st.session_state[SELECTOR_KEY]
    picked = tuple(st.session_state.get(CALENDAR_KEY) or ())
    raw_from = picked[0] if len(picked) > 0 else None
    raw_to = picked[1] if len(picked) > 1 else None
    selector.select(raw_from, raw_to)


def _render_calendar(selector: DateSelector, current: DateRange):
    first, last = selectable_window(
        selector.available_bounds, selector.clock(), respect_max=selector.respect_max_bound
    )
    if first is not None and last < first:
        st.info("No selectable days for the available data.")
        return

    # Widget rejects defaults outside its limits
    start = current.start.date() if first is None else max(current.start.date(), first)
    end = min(current.end.date(), last)
    value = (start, end) if start <= end else ()

    st.date_input(
        "Select range",
        value=value,
        min_value=first,
        max_value=last,
        key=CALENDAR_KEY,
        on_change=_on_calendar_change,
        format="DD/MM/YYYY",
    )


def date_filter(bounds: Optional[AvailableBounds], config: DateFilterConfig) -> DateRange:
    """
    Preset buttons plus a toggleable range calendar.
    Returns the committed range held in session state.
    """
    selector = _get_selector(bounds, config)

    if RANGE_KEY not in st.session_state:
        st.session_state[RANGE_KEY] = resolve(config.default_days, now=datetime.now())
    current: DateRange = st.session_state[RANGE_KEY]

    cols = st.columns([1] + [1] * len(config.presets) + [3], vertical_alignment="center")
    cols[0].caption(config.label)
    for col, preset in zip(cols[1:], config.presets):
        if col.button(preset.label, key=f"preset_{preset.days}", type="tertiary"):
            selector.preset_click(preset.days)
            st.rerun()

    if cols[-1].button(
            format_range(current, config.month_abbr),
            key="date_filter_trigger",
            icon=":material/calendar_month:",
        ):
        selector.toggle()
        st.rerun()

    if selector.is_open:
        _render_calendar(selector, current)

    return st.session_state[RANGE_KEY]
