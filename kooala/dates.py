"""Calendar checks for task due dates."""

_THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})

MIN_YEAR = 2023
MAX_YEAR = 2999


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def verify_day(month: int, day: int, year: int) -> bool:
    """Return True if ``day`` exists in ``month`` of ``year``."""
    if month in _THIRTY_ONE_DAY_MONTHS:
        limit = 31
    elif month in _THIRTY_DAY_MONTHS:
        limit = 30
    elif month == 2 and _is_leap(year):
        limit = 29
    else:
        limit = 28
    return 0 < day <= limit


def verify_month(month: int) -> bool:
    """Return True for a month number from 1 to 12."""
    return 1 <= month <= 12


def verify_year(year: int) -> bool:
    """Return True for a year the scheduler accepts (2023 to 2999)."""
    return MIN_YEAR <= year <= MAX_YEAR


def verify_month_day_year(month: int, day: int, year: int) -> bool:
    """Return True if the three parts form a valid, accepted date."""
    return verify_year(year) and verify_month(month) and verify_day(month, day, year)