from datetime import date

import pytest

from holidaycal import nz
from holidaycal.holiday import Holiday

YEARS = range(2015, 2023)


def d(year, month, day):
    return date(year, month, day)


def _same(holiday, year, month, day):
    return (holiday, year, d(year, month, day), d(year, month, day))


def _series(holiday, month_days):
    return [_same(holiday, y, m, day) for y, (m, day) in zip(YEARS, month_days)]


CASES = [
    _same(nz.NEW_YEAR, 2015, 1, 1),
    _same(nz.NEW_YEAR, 2016, 1, 1),
    (nz.NEW_YEAR, 2017, d(2017, 1, 1), d(2017, 1, 2)),
    _same(nz.NEW_YEAR, 2018, 1, 1),
    _same(nz.NEW_YEAR, 2019, 1, 1),
    _same(nz.NEW_YEAR, 2020, 1, 1),
    _same(nz.NEW_YEAR, 2021, 1, 1),
    (nz.NEW_YEAR, 2022, d(2022, 1, 1), d(2022, 1, 3)),
    _same(nz.DAY_AFTER_NEW_YEAR, 2015, 1, 2),
    (nz.DAY_AFTER_NEW_YEAR, 2016, d(2016, 1, 2), d(2016, 1, 4)),
    (nz.DAY_AFTER_NEW_YEAR, 2017, d(2017, 1, 2), d(2017, 1, 3)),
    _same(nz.DAY_AFTER_NEW_YEAR, 2018, 1, 2),
    _same(nz.DAY_AFTER_NEW_YEAR, 2019, 1, 2),
    _same(nz.DAY_AFTER_NEW_YEAR, 2020, 1, 2),
    (nz.DAY_AFTER_NEW_YEAR, 2021, d(2021, 1, 2), d(2021, 1, 4)),
    (nz.DAY_AFTER_NEW_YEAR, 2022, d(2022, 1, 2), d(2022, 1, 4)),
    _same(nz.WAITANGI_DAY, 2015, 2, 6),
    (nz.WAITANGI_DAY, 2016, d(2016, 2, 6), d(2016, 2, 8)),
    _same(nz.WAITANGI_DAY, 2017, 2, 6),
    _same(nz.WAITANGI_DAY, 2018, 2, 6),
    _same(nz.WAITANGI_DAY, 2019, 2, 6),
    _same(nz.WAITANGI_DAY, 2020, 2, 6),
    (nz.WAITANGI_DAY, 2021, d(2021, 2, 6), d(2021, 2, 8)),
    (nz.WAITANGI_DAY, 2022, d(2022, 2, 6), d(2022, 2, 7)),
    *_series(
        nz.GOOD_FRIDAY,
        [(4, 3), (3, 25), (4, 14), (3, 30), (4, 19), (4, 10), (4, 2), (4, 15)],
    ),
    *_series(
        nz.EASTER_MONDAY,
        [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)],
    ),
    (nz.ANZAC_DAY, 2015, d(2015, 4, 25), d(2015, 4, 27)),
    _same(nz.ANZAC_DAY, 2016, 4, 25),
    _same(nz.ANZAC_DAY, 2017, 4, 25),
    _same(nz.ANZAC_DAY, 2018, 4, 25),
    _same(nz.ANZAC_DAY, 2019, 4, 25),
    (nz.ANZAC_DAY, 2020, d(2020, 4, 25), d(2020, 4, 27)),
    (nz.ANZAC_DAY, 2021, d(2021, 4, 25), d(2021, 4, 26)),
    _same(nz.ANZAC_DAY, 2022, 4, 25),
    *_series(
        nz.QUEENS_BIRTHDAY,
        [(6, 1), (6, 6), (6, 5), (6, 4), (6, 3), (6, 1), (6, 7), (6, 6)],
    ),
    *_series(
        nz.LABOUR_DAY,
        [(10, 26), (10, 24), (10, 23), (10, 22), (10, 28), (10, 26), (10, 25), (10, 24)],
    ),
    _same(nz.CHRISTMAS_DAY, 2015, 12, 25),
    (nz.CHRISTMAS_DAY, 2016, d(2016, 12, 25), d(2016, 12, 26)),
    _same(nz.CHRISTMAS_DAY, 2017, 12, 25),
    _same(nz.CHRISTMAS_DAY, 2018, 12, 25),
    _same(nz.CHRISTMAS_DAY, 2019, 12, 25),
    _same(nz.CHRISTMAS_DAY, 2020, 12, 25),
    (nz.CHRISTMAS_DAY, 2021, d(2021, 12, 25), d(2021, 12, 27)),
    (nz.CHRISTMAS_DAY, 2022, d(2022, 12, 25), d(2022, 12, 26)),
    (nz.BOXING_DAY, 2015, d(2015, 12, 26), d(2015, 12, 28)),
    (nz.BOXING_DAY, 2016, d(2016, 12, 26), d(2016, 12, 27)),
    _same(nz.BOXING_DAY, 2017, 12, 26),
    _same(nz.BOXING_DAY, 2018, 12, 26),
    _same(nz.BOXING_DAY, 2019, 12, 26),
    (nz.BOXING_DAY, 2020, d(2020, 12, 26), d(2020, 12, 28)),
    (nz.BOXING_DAY, 2021, d(2021, 12, 26), d(2021, 12, 28)),
    (nz.BOXING_DAY, 2022, d(2022, 12, 26), d(2022, 12, 27)),
]


@pytest.mark.parametrize("holiday, year, want_actual, want_observed", CASES)
def test_holidays(holiday, year, want_actual, want_observed):
    assert Holiday.calc(holiday, year) == (want_actual, want_observed)


def test_holiday_list():
    assert nz.HOLIDAYS[1] is nz.DAY_AFTER_NEW_YEAR
    assert [Holiday.calc(h, 2015)[0] for h in nz.HOLIDAYS] == [
        d(2015, 1, 1),
        d(2015, 1, 2),
        d(2015, 2, 6),
        d(2015, 4, 3),
        d(2015, 4, 6),
        d(2015, 4, 25),
        d(2015, 6, 1),
        d(2015, 10, 26),
        d(2015, 12, 25),
        d(2015, 12, 26),
    ]