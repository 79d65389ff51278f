import pytest

from kooala.dates import verify_day, verify_month, verify_month_day_year, verify_year


@pytest.mark.parametrize(
    "month, day, year",
    [
        (1, 31, 2023),
        (1, 31, 2999),
        (1, 31, 2025),
        (12, 31, 2023),
        (5, 30, 2023),
        (1, 1, 2023),
        (3, 31, 2023),
        (6, 30, 2023),
        (2, 29, 2024),
        (2, 28, 2023),
    ],
)
def test_valid_dates(month, day, year):
    assert verify_month_day_year(month, day, year) is True


@pytest.mark.parametrize(
    "month, day, year",
    [
        (1, 31, 2022),
        (1, 31, 3000),
        (0, 31, 2023),
        (-1, 31, 2023),
        (13, 31, 2023),
        (4, 31, 2023),
        (2, 30, 2023),
        (2, 29, 2023),
    ],
)
def test_invalid_dates(month, day, year):
    assert verify_month_day_year(month, day, year) is False


def test_verify_day_century_rules():
    assert verify_day(2, 29, 2400) is True
    assert verify_day(2, 29, 2100) is False
    assert verify_day(2, 0, 2024) is False


def test_verify_month_bounds():
    assert verify_month(1) and verify_month(12)
    assert not verify_month(0)
    assert not verify_month(13)


def test_verify_year_bounds():
    assert verify_year(2023) and verify_year(2999)
    assert not verify_year(2022)
    assert not verify_year(3000)