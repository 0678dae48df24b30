"""
Calendar helpers shared by the view modules
"""

from datetime import date, timedelta

WEEKS_PER_YEAR = 52


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, not by 100 unless by 400"""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Get number of days in a month"""
    first_day = date(year, month, 1)
    next_month = first_day.replace(day=28) + timedelta(days=4)
    last_day = next_month - timedelta(days=next_month.day)
    return last_day.day


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(day: date) -> int:
    """1-based ordinal of the day within its year"""
    return (day - date(day.year, 1, 1)).days + 1


def weekday_offset(year: int, month: int) -> int:
    """Leading blank cells before day 1 in a Monday-first 7-column grid"""
    return date(year, month, 1).weekday()


def weeks_elapsed(birth_date: date, reference_date: date) -> int:
    """Whole weeks since birth, floored; negative when birth is in the future"""
    return (reference_date - birth_date).days // 7


def total_weeks(life_expectancy_years: int) -> int:
    return life_expectancy_years * WEEKS_PER_YEAR


def floor_percent(part: int, whole: int) -> int:
    """floor(part / whole * 100) computed exactly on integers"""
    return (part * 100) // whole
