import datetime as dt

import pytest

from clinic.registry.slots import (
    current_date,
    day_times,
    format_date,
    join_date_time,
    next_day,
    resolve_timezone,
)


class TestDayTimes:
    def test_default_working_day(self) -> None:
        times = day_times(8, 18, 30)

        assert len(times) == 20
        assert times[0] == "08:00"
        assert times[1] == "08:30"
        assert times[-1] == "17:30"

    def test_is_ascending_and_zero_padded(self) -> None:
        times = day_times(8, 10, 30)

        assert times == ["08:00", "08:30", "09:00", "09:30"]

    def test_uneven_slot_length_restarts_each_hour(self) -> None:
        assert day_times(9, 10, 25) == ["09:00", "09:25", "09:50"]

    def test_empty_when_start_equals_end(self) -> None:
        assert day_times(8, 8, 30) == []


class TestDateTimeKeys:
    def test_join_uses_single_space(self) -> None:
        assert join_date_time("2025-01-10", "09:00") == "2025-01-10 09:00"

    @pytest.mark.parametrize(
        ("date", "expected"),
        [
            (dt.date(2025, 1, 10), "2025-01-11"),
            (dt.date(2025, 1, 31), "2025-02-01"),
            (dt.date(2024, 12, 31), "2025-01-01"),
            (dt.date(2028, 2, 28), "2028-02-29"),
        ],
        ids=["plain", "month-end", "year-end", "leap-day"],
    )
    def test_next_day(self, date: dt.date, expected: str) -> None:
        assert format_date(next_day(date)) == expected


class TestTimezone:
    def test_falls_back_to_utc(self) -> None:
        assert resolve_timezone("Not/AZone") is dt.timezone.utc

    def test_current_date_with_zone(self) -> None:
        assert current_date(dt.timezone.utc) == dt.datetime.now(dt.timezone.utc).date()

    @pytest.mark.usefixtures("far_east_local_time")
    def test_current_date_defaults_to_local_calendar(self) -> None:
        expected = (dt.datetime.now(dt.timezone.utc) + dt.timedelta(hours=14)).date()

        assert current_date() == dt.date.today() == expected
