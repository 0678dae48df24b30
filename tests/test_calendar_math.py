from datetime import date

import pytest

from lifedots.calendar_math import (day_of_year, days_in_month, days_in_year,
                                    floor_percent, is_leap_year, total_weeks,
                                    weekday_offset, weeks_elapsed)


@pytest.mark.parametrize("year,leap", [
    (2024, True),
    (2025, False),
    (1900, False),
    (2000, True),
    (2100, False),
])
def test_leap_years(year, leap):
    assert is_leap_year(year) == leap
    assert days_in_month(year, 2) == (29 if leap else 28)
    assert days_in_year(year) == (366 if leap else 365)


def test_days_in_month_covers_whole_year():
    for year in (2023, 2024):
        assert sum(days_in_month(year, m) for m in range(1, 13)) == days_in_year(year)
    assert days_in_month(2025, 12) == 31
    assert days_in_month(2025, 4) == 30


def test_weekday_offset_is_monday_based():
    assert weekday_offset(2024, 1) == 0  # Monday
    assert weekday_offset(2024, 2) == 3  # Thursday
    assert weekday_offset(2025, 6) == 6  # Sunday


def test_day_of_year():
    assert day_of_year(date(2025, 1, 1)) == 1
    assert day_of_year(date(2025, 4, 10)) == 100
    assert day_of_year(date(2024, 12, 31)) == 366


def test_weeks_elapsed_floors():
    birth = date(2000, 1, 1)
    assert weeks_elapsed(birth, birth) == 0
    assert weeks_elapsed(birth, date(2000, 1, 7)) == 0
    assert weeks_elapsed(birth, date(2000, 1, 15)) == 2
    # Birth one day in the future is already week -1
    assert weeks_elapsed(date(2000, 1, 2), birth) == -1


def test_total_weeks():
    assert total_weeks(80) == 4160


def test_floor_percent_is_exact():
    assert floor_percent(15, 30) == 50
    assert floor_percent(100, 365) == 27
    assert floor_percent(29, 100) == 29
    assert floor_percent(-10, 4160) == -1
