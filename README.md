# holidaycal

Holiday definitions and the rules for working out when they fall, year by
year. All calculations use the proleptic Gregorian calendar and return plain
`datetime.date` values.

## Installation

```
pip install holidaycal
```

## Defining a holiday

A `Holiday` (in `holidaycal.holiday`) is a frozen dataclass describing how a
day is found in a given year. The calculation is chosen through its `func`:

- `calc_day_of_month` — a fixed date, such as 4 July (`month`, `day`).
- `calc_weekday_offset` — the nth `weekday` of `month`; a negative `offset`
  counts back from the end of the month (`-1` is the last one). An offset of
  `0`, or one that runs past the month, gives no date.
- `calc_weekday_from` — the nth `weekday` on or after the date given by
  `month` and `day`; a negative `offset` counts backwards from it.
- `calc_easter_offset` — `offset` days from Easter Sunday, Western or
  Orthodox (set `julian=True` for the latter; the result is still a
  Gregorian date).

Weekdays are given with the `Weekday` enum, numbered as `date.weekday()`
numbers them (`Weekday.MONDAY == 0`). The kind of day is an
`ObservanceType`: `UNKNOWN`, `PUBLIC`, `BANK`, `RELIGIOUS` or `OTHER`.

```python
from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
)

independence_day = Holiday(
    name="Independence Day",
    type=ObservanceType.PUBLIC,
    month=7,
    day=4,
    func=calc_day_of_month,
    observed=[
        AltDay(Weekday.SATURDAY, -1),  # Saturday moves back to Friday
        AltDay(Weekday.SUNDAY, 1),     # Sunday moves on to Monday
    ],
)

actual, observed = independence_day.calc(2021)
# actual is date(2021, 7, 4), observed is date(2021, 7, 5)
```

`Holiday.calc(year)` returns a pair: the day the holiday actually falls on
and the day it is observed. It returns `(None, None)` when the holiday has no
`func`, when the year is before `start_year` or after `end_year` (a value of
`0` means no limit), when the year is one of `except_years`, or when the
calculation finds no date. Otherwise `calc_offset` days are added to the
calculated date, and then the first `AltDay` in `observed` whose `day`
matches the date's weekday moves the observed date by its `offset`.

`Holiday.clone(overrides)` returns a copy of a holiday. Where `overrides` is
given, its `name`, `description`, `type`, `start_year`, `end_year`,
`except_years` and `observed` replace the original values when they are set
(non-empty, non-`UNKNOWN`, positive, or not `None`); the calculation fields
are always kept from the original.

## Country and institution calendars

Ready-made holiday definitions live in one module per code:

| Module               | Calendar                       |
|----------------------|--------------------------------|
| `holidaycal.dk`      | Denmark                        |
| `holidaycal.ecb`     | European Central Bank          |
| `holidaycal.es`      | Spain                          |
| `holidaycal.fr`      | France                         |
| `holidaycal.gb`      | United Kingdom                 |
| `holidaycal.ie`      | Ireland                        |
| `holidaycal.it`      | Italy                          |
| `holidaycal.nl`      | Netherlands                    |
| `holidaycal.no`      | Norway                         |
| `holidaycal.nz`      | New Zealand                    |
| `holidaycal.pl`      | Poland                         |
| `holidaycal.se`      | Sweden                         |
| `holidaycal.sk`      | Slovakia                       |
| `holidaycal.ua`      | Ukraine                        |
| `holidaycal.us`      | United States                  |
| `holidaycal.za`      | South Africa                   |

Each module defines its holidays as module-level `Holiday` constants, with
the local weekend substitution rules already set, and a `HOLIDAYS` tuple of
the standard holidays for that calendar. A few definitions are offered but
left out of `HOLIDAYS`, such as `gb.SUMMER_HOLIDAY_SCOTLAND` and
`us.DAY_AFTER_THANKSGIVING_DAY`.

```python
from holidaycal import gb

for holiday in gb.HOLIDAYS:
    actual, observed = holiday.calc(2022)
    if actual is not None:
        print(holiday.name, actual, observed)
```

## What it does not do

The package only places holidays in a year. It has no business-day or
working-hours calculations, no calendar object that combines several holiday
sets, and no command-line tool.

## Running the tests

```
pip install "holidaycal[test]"
pytest
```