"""Holiday definitions and the rules that place them in a given year.

All calculations assume the proleptic Gregorian calendar. Dates are plain
``datetime.date`` values; a holiday that does not occur in a year yields
``None``.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, replace
from datetime import date, timedelta
from enum import IntEnum
from typing import Callable, Iterable, Optional


class Weekday(IntEnum):
    """Days of the week, numbered as ``date.weekday()`` numbers them."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class ObservanceType(IntEnum):
    """The kind of holiday or special day being observed."""

    UNKNOWN = 0  # not set or not applicable
    PUBLIC = 1  # public, national or regional holiday
    BANK = 2  # bank holiday
    RELIGIOUS = 3  # religious holiday
    OTHER = 4  # school, work and all other days


@dataclass(frozen=True)
class AltDay:
    """Moves the observance by ``offset`` days when the holiday falls on ``day``."""

    day: Weekday
    offset: int


HolidayFn = Callable[["Holiday", int], Optional[date]]


def _as_tuple(values: Optional[Iterable]) -> Optional[tuple]:
    return None if values is None else tuple(values)


@dataclass(frozen=True)
class Holiday:
    """A holiday: what it is, when it is observed and how to find its date."""

    name: str = ""
    description: str = ""
    type: ObservanceType = ObservanceType.UNKNOWN
    start_year: int = 0
    end_year: int = 0
    except_years: Optional[tuple[int, ...]] = None

    month: int = 0
    day: int = 0
    weekday: Weekday = Weekday.SUNDAY
    offset: int = 0
    calc_offset: int = 0
    julian: bool = False
    observed: Optional[tuple[AltDay, ...]] = None
    func: Optional[HolidayFn] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "except_years", _as_tuple(self.except_years))
        object.__setattr__(self, "observed", _as_tuple(self.observed))

    def clone(self, overrides: Optional[Holiday] = None) -> Holiday:
        """Return a copy, taking name, description, type, start_year,
        end_year, except_years and observed from ``overrides`` where set."""
        if overrides is None:
            return replace(self)
        changes = {}
        if overrides.name:
            changes["name"] = overrides.name
        if overrides.description:
            changes["description"] = overrides.description
        if overrides.type != ObservanceType.UNKNOWN:
            changes["type"] = overrides.type
        if overrides.start_year > 0:
            changes["start_year"] = overrides.start_year
        if overrides.end_year > 0:
            changes["end_year"] = overrides.end_year
        if overrides.except_years is not None:
            changes["except_years"] = overrides.except_years
        if overrides.observed is not None:
            changes["observed"] = overrides.observed
        return replace(self, **changes)

    def calc(self, year: int) -> tuple[Optional[date], Optional[date]]:
        """Return the actual and observed dates for ``year``.

        Both are ``None`` when the holiday is not observed that year.
        """
        if (
            (self.start_year > 0 and year < self.start_year)
            or (self.end_year > 0 and year > self.end_year)
            or self.func is None
        ):
            return None, None
        if self.except_years and year in self.except_years:
            return None, None

        actual = self.func(self, year)
        if actual is None:
            return None, None
        if self.calc_offset:
            actual += timedelta(days=self.calc_offset)

        weekday = actual.weekday()
        for alt in self.observed or ():
            if alt.day == weekday:
                return actual, actual + timedelta(days=alt.offset)
        return actual, actual


def _weekday_n(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` of the month; negative ``n`` counts from its end."""
    if n > 0:
        first = date(year, month, 1)
        result = first + timedelta(days=(weekday - first.weekday()) % 7 + 7 * (n - 1))
    elif n < 0:
        last = date(year, month, calendar.monthrange(year, month)[1])
        result = last - timedelta(days=(last.weekday() - weekday) % 7 + 7 * (-n - 1))
    else:
        return None
    return result if result.month == month and result.year == year else None


def _weekday_n_from(start: date, weekday: int, n: int) -> Optional[date]:
    """The nth ``weekday`` on or after ``start``; negative ``n`` goes backwards."""
    if n > 0:
        return start + timedelta(days=(weekday - start.weekday()) % 7 + 7 * (n - 1))
    if n < 0:
        return start - timedelta(days=(start.weekday() - weekday) % 7 + 7 * (-n - 1))
    return None


def calc_day_of_month(holiday: Holiday, year: int) -> date:
    """A holiday that is always the same day of the same month."""
    return date(year, holiday.month, holiday.day)


def calc_weekday_offset(holiday: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth occurrence of a weekday in a month."""
    return _weekday_n(year, holiday.month, holiday.weekday, holiday.offset)


def calc_weekday_from(holiday: Holiday, year: int) -> Optional[date]:
    """A holiday on the nth occurrence of a weekday counted from a start date."""
    start = date(year, holiday.month, holiday.day)
    return _weekday_n_from(start, holiday.weekday, holiday.offset)


def calc_easter_offset(holiday: Holiday, year: int) -> date:
    """A holiday a fixed number of days from Easter (Julian or Gregorian)."""
    if holiday.julian:
        # Meeus algorithm, converted to the Gregorian calendar
        a = year % 4
        b = year % 7
        c = year % 19
        d = (19 * c + 15) % 30
        e = (2 * a + 4 * b - d + 34) % 7
        month = (d + e + 114) // 31
        day = (d + e + 114) % 31 + 1 + 13
    else:
        # Meeus/Jones/Butcher algorithm
        a = year % 19
        b = year // 100
        c = year % 100
        d = b // 4
        e = b % 4
        f = (b + 8) // 25
        g = (b - f + 1) // 3
        h = (19 * a + b - d - g + 15) % 30
        i = c // 4
        k = c % 4
        l = (32 + 2 * e + 2 * i - h - k) % 7
        m = (a + 11 * h + 22 * l) // 451
        month = (h + l - 7 * m + 114) // 31
        day = (h + l - 7 * m + 114) % 31 + 1

    return date(year, month, 1) + timedelta(days=day - 1 + holiday.offset)