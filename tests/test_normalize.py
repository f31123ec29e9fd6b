import pytest
from datetime import date, datetime, timedelta, timezone

from src.filter.models import DateRange
from src.filter.normalize import end_of_day, normalize, start_of_day


class TestDayAlignment:
    def test_start_of_day(self):
        assert start_of_day(datetime(2024, 6, 3, 17, 5, 1, 20)) == datetime(2024, 6, 3)

    def test_end_of_day(self):
        assert end_of_day(datetime(2024, 6, 3, 1, 0)) == datetime(2024, 6, 3, 23, 59, 59, 999999)

    def test_accepts_plain_dates(self):
        assert start_of_day(date(2024, 6, 3)) == datetime(2024, 6, 3)
        assert end_of_day(date(2024, 6, 3)) == datetime(2024, 6, 3, 23, 59, 59, 999999)

    def test_keeps_tzinfo(self):
        tz = timezone(timedelta(hours=2))
        value = datetime(2024, 6, 3, 12, 0, tzinfo=tz)
        assert start_of_day(value) == datetime(2024, 6, 3, tzinfo=tz)
        assert end_of_day(value).tzinfo is tz


class TestNormalize:
    def test_canonical_range(self):
        result = normalize(datetime(2024, 6, 3, 14, 30), datetime(2024, 6, 9, 3, 0))
        assert result == DateRange(
            start=datetime(2024, 6, 3),
            end=datetime(2024, 6, 9, 23, 59, 59, 999999),
        )

    @pytest.mark.parametrize("raw_from, raw_to", [
        (date(2024, 6, 3), None),
        (None, date(2024, 6, 3)),
        (None, None),
    ])
    def test_incomplete(self, raw_from, raw_to):
        assert normalize(raw_from, raw_to) is None

    def test_reversed_is_rejected(self):
        assert normalize(date(2024, 6, 9), date(2024, 6, 3)) is None

    def test_same_day_with_reversed_hours(self):
        # Hours are artifacts of the picker, only the calendar day counts
        result = normalize(datetime(2024, 6, 3, 18, 0), datetime(2024, 6, 3, 9, 0))
        assert result.start == datetime(2024, 6, 3)
        assert result.end.date() == date(2024, 6, 3)
        assert result.days == 1

    @pytest.mark.parametrize("raw_from, raw_to", [
        (datetime(2024, 6, 3, 14, 30), datetime(2024, 6, 9, 3, 0)),
        (date(2024, 1, 1), date(2024, 12, 31)),
        (datetime(2024, 2, 28, 23, 59), datetime(2024, 3, 1, 0, 1)),
    ])
    def test_idempotent(self, raw_from, raw_to):
        once = normalize(raw_from, raw_to)
        assert normalize(start_of_day(raw_from), end_of_day(raw_to)) == once
        assert normalize(once.start, once.end) == once


class TestDateRange:
    def test_rejects_reversed_construction(self):
        with pytest.raises(ValueError):
            DateRange(start=datetime(2024, 6, 9), end=datetime(2024, 6, 3))

    def test_is_frozen(self):
        date_range = DateRange(start=datetime(2024, 6, 3), end=datetime(2024, 6, 9))
        with pytest.raises(AttributeError):
            date_range.start = datetime(2024, 6, 1)
