"""Conversión de fecha de nacimiento a años de perro y edad humana equivalente.

Fórmula (Wang et al., Cell Systems 2019):
    edad humana = 16 * ln(edad del perro) + 31
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, tzinfo

from dateutil import tz

DAYS_PER_YEAR = 365.2425
MS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60 * 1000

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class InvalidDateError(ValueError):
    """Raised when a birthday is not a valid YYYY-MM-DD calendar date."""


def parse_birthday(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` birthday.

    Args:
        text: Date string as produced by a date picker.

    Returns:
        Parsed calendar date.

    Raises:
        InvalidDateError: If the text is not an ISO date or the date does not exist.
    """
    value = (text or "").strip()
    if not _ISO_DATE_RE.fullmatch(value):
        raise InvalidDateError(f"Fecha invalida: {text!r}")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidDateError(f"Fecha invalida: {text!r}") from exc


def local_midnight(day: date, tzinfo: tzinfo | None = None) -> datetime:
    """Anchor a calendar date at 00:00 in ``tzinfo`` (local zone by default)."""
    zone = tzinfo if tzinfo is not None else tz.tzlocal()
    return datetime.combine(day, time(0, 0), tzinfo=zone)


def elapsed_years(
    birthday: date | str,
    now: datetime,
    tzinfo: tzinfo | None = None,
) -> float:
    """Return fractional years between local midnight of ``birthday`` and ``now``.

    Uses the average Gregorian year (365.2425 days). Future birthdays give a
    negative value; callers map that through ``human_age_from_dog_age``.

    Args:
        birthday: Calendar date or ISO ``YYYY-MM-DD`` string.
        now: Current instant. Naive values are read in ``tzinfo``.
        tzinfo: Zone whose midnight anchors the birthday (local by default).

    Returns:
        Elapsed time in years.

    Raises:
        InvalidDateError: If ``birthday`` is a string that does not parse.
    """
    if isinstance(birthday, str):
        birthday = parse_birthday(birthday)
    start = local_midnight(birthday, tzinfo)
    if now.tzinfo is None:
        now = now.replace(tzinfo=start.tzinfo)
    diff_ms = (now - start).total_seconds() * 1000
    return diff_ms / MS_PER_YEAR


def human_age_from_dog_age(dog_age_years: float) -> float:
    """Map dog years to the equivalent human age.

    ln() is undefined for non-positive values (and NaN), so those map to 0.
    """
    if not dog_age_years > 0:
        return 0.0
    return 16 * math.log(dog_age_years) + 31
