from __future__ import annotations

import math
from datetime import date, datetime, timedelta

import pytest
from dateutil import tz

from dog_age_tool.age import (
    DAYS_PER_YEAR,
    InvalidDateError,
    elapsed_years,
    human_age_from_dog_age,
    local_midnight,
    parse_birthday,
)


def test_parse_birthday_iso() -> None:
    assert parse_birthday("2020-01-01") == date(2020, 1, 1)
    assert parse_birthday(" 2019-12-31 ") == date(2019, 12, 31)


@pytest.mark.parametrize(
    "text", ["", "2020-1-1", "01/02/2020", "2020-02-30", "2021-13-01", "abc"]
)
def test_parse_birthday_rejects_invalid(text: str) -> None:
    with pytest.raises(InvalidDateError):
        parse_birthday(text)


def test_invalid_date_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_birthday("2020-02-30")


def test_local_midnight_has_no_time_component() -> None:
    dt = local_midnight(date(2020, 5, 17), tz.UTC)
    assert (dt.hour, dt.minute, dt.second) == (0, 0, 0)
    assert dt.tzinfo is tz.UTC


def test_local_midnight_defaults_to_local_zone() -> None:
    dt = local_midnight(date(2020, 5, 17))
    assert dt.tzinfo is not None


def test_elapsed_years_one_average_year() -> None:
    born = date(2020, 1, 1)
    now = local_midnight(born, tz.UTC) + timedelta(days=DAYS_PER_YEAR)
    assert elapsed_years(born, now, tz.UTC) == pytest.approx(1.0, abs=1e-9)


def test_elapsed_years_accepts_iso_string_and_naive_now() -> None:
    now = datetime(2022, 1, 1) + timedelta(days=2 * DAYS_PER_YEAR)
    assert elapsed_years("2022-01-01", now, tz.UTC) == pytest.approx(2.0, abs=1e-9)


def test_elapsed_years_ignores_time_of_day_of_birth() -> None:
    now = datetime(2024, 6, 1, 12, 0, tzinfo=tz.UTC)
    assert elapsed_years(date(2023, 6, 1), now, tz.UTC) == elapsed_years(
        "2023-06-01", now, tz.UTC
    )


def test_elapsed_years_is_deterministic() -> None:
    now = datetime(2025, 3, 4, 8, 30, tzinfo=tz.UTC)
    first = elapsed_years("2019-07-20", now, tz.UTC)
    assert first == elapsed_years("2019-07-20", now, tz.UTC)


def test_elapsed_years_negative_for_future_birthday() -> None:
    now = datetime(2024, 1, 1, tzinfo=tz.UTC)
    assert elapsed_years("2025-01-01", now, tz.UTC) < 0


def test_elapsed_years_rejects_invalid_string() -> None:
    with pytest.raises(InvalidDateError):
        elapsed_years("2020-02-31", datetime(2024, 1, 1, tzinfo=tz.UTC), tz.UTC)


def test_human_age_formula_points() -> None:
    assert human_age_from_dog_age(1.0) == pytest.approx(31.0)
    assert human_age_from_dog_age(math.e) == pytest.approx(47.0)
    assert human_age_from_dog_age(2.0) == pytest.approx(16 * math.log(2) + 31)


@pytest.mark.parametrize("years", [0.0, -5.0, float("nan")])
def test_human_age_non_positive_is_zero(years: float) -> None:
    assert human_age_from_dog_age(years) == 0
