from datetime import date, datetime
from typing import Callable, Optional

from src.filter.availability import is_selectable
from src.filter.models import AvailableBounds, DateRange, PendingSelection, SelectionState
from src.filter.normalize import normalize
from src.filter.presets import resolve
from src.utils.logger import logger

log = logger.bind(step="date-selector")


class DateSelector:
    """
    Selection state for the date filter.

    The committed DateRange belongs to whoever passes `on_commit`; the
    selector only keeps the pick in progress while the calendar is open.
    Every completed preset or manual pick calls `on_commit` exactly once.
    """

    def __init__(
            self,
            on_commit: Callable[[DateRange], None],
            available_bounds: Optional[AvailableBounds] = None,
            clock: Callable[[], datetime] = datetime.now,
            respect_max_bound: bool = False,
        ):
        self.on_commit = on_commit
        self.available_bounds = available_bounds
        self.clock = clock
        self.respect_max_bound = respect_max_bound
        self._state = SelectionState.CLOSED
        self._pending: Optional[PendingSelection] = None

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state == SelectionState.OPEN

    @property
    def pending(self) -> Optional[PendingSelection]:
        return self._pending

    # --------------------------
    # Surface visibility
    # --------------------------

    def open(self):
        if self.is_open:
            return
        self._pending = PendingSelection()
        self._state = SelectionState.OPEN
        log.debug("Selection surface opened.")

    def close(self):
        """Dismiss the surface. The pick in progress is dropped, nothing is committed."""
        if self._pending is not None and not self._pending.is_empty:
            log.debug(f"Discarding pending selection {self._pending}")
        self._pending = None
        self._state = SelectionState.CLOSED

    def toggle(self):
        if self.is_open:
            self.close()
        else:
            self.open()

    # --------------------------
    # Triggering actions
    # --------------------------

    def is_selectable(self, day: date) -> bool:
        return is_selectable(
            day, self.available_bounds, self.clock(), respect_max=self.respect_max_bound
        )

    def pick(self, day: date) -> Optional[DateRange]:
        """
        One click on the calendar. The first pick sets the start, the
        second sets the end and commits once the range is valid.
        """
        if not self.is_open:
            log.debug(f"Ignoring pick of {day} while {self._state.value}")
            return None
        if not self.is_selectable(day):
            log.debug(f"Ignoring pick of unavailable day {day}")
            return None

        self._pending.add(day)
        if not self._pending.is_complete:
            return None

        canonical = normalize(self._pending.start, self._pending.end)
        if canonical is None:
            # Reversed pick: keep the surface open, restart from this day
            self._pending = PendingSelection(start=day)
            return None
        return self._commit(canonical)

    def select(self, raw_from: Optional[date], raw_to: Optional[date]) -> Optional[DateRange]:
        """
        Whole pending range as reported by a range calendar widget.
        Commits only when both ends are set, available and ordered.
        """
        if not self.is_open:
            log.debug(f"Ignoring selection while {self._state.value}")
            return None

        self._pending = PendingSelection(start=raw_from, end=raw_to)
        if not self._pending.is_complete:
            return None

        for day in (raw_from, raw_to):
            if not self.is_selectable(day):
                log.warning(f"Rejected selection with unavailable day {day}")
                return None

        canonical = normalize(raw_from, raw_to)
        if canonical is None:
            return None
        return self._commit(canonical)

    def preset_click(self, days: int) -> DateRange:
        """Resolve a preset against the clock and commit it straight away."""
        canonical = resolve(days, now=self.clock())
        self._pending = None
        return self._commit(canonical)

    def _commit(self, canonical: DateRange) -> DateRange:
        self._state = SelectionState.COMMITTED
        self._pending = None
        log.success(f"Committing range {canonical.start.date()} -> {canonical.end.date()} ({canonical.days}d)")
        try:
            self.on_commit(canonical)
        finally:
            self._state = SelectionState.CLOSED
        return canonical
