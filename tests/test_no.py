from datetime import date

import pytest

from holidaycal import no
from holidaycal.holiday import Holiday

YEARS = range(2015, 2023)


def _fixed(holiday, month, day):
    return [(holiday, y, date(y, month, day), date(y, month, day)) for y in YEARS]


def _series(holiday, month_days):
    return [
        (holiday, y, date(y, m, day), date(y, m, day))
        for y, (m, day) in zip(YEARS, month_days)
    ]


CASES = [
    *_fixed(no.FOERSTE_NYTTAARSDAG, 1, 1),
    *_series(
        no.SKJAERTORSDAG,
        [(4, 2), (3, 24), (4, 13), (3, 29), (4, 18), (4, 9), (4, 1), (4, 14)],
    ),
    *_series(
        no.LANGFREDAG,
        [(4, 3), (3, 25), (4, 14), (3, 30), (4, 19), (4, 10), (4, 2), (4, 15)],
    ),
    *_series(
        no.ANDRE_PAASKEDAG,
        [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)],
    ),
    *_fixed(no.ARBEIDERNES_DAG, 5, 1),
    *_fixed(no.GRUNNLOVSDAG, 5, 17),
    *_series(
        no.KRISTI_HIMMELFARTSDAG,
        [(5, 14), (5, 5), (5, 25), (5, 10), (5, 30), (5, 21), (5, 13), (5, 26)],
    ),
    *_series(
        no.ANDRE_PINSEDAG,
        [(5, 25), (5, 16), (6, 5), (5, 21), (6, 10), (6, 1), (5, 24), (6, 6)],
    ),
    *_fixed(no.FOERSTE_JULEDAG, 12, 25),
    *_fixed(no.ANDRE_JULEDAG, 12, 26),
]


@pytest.mark.parametrize("holiday, year, want_actual, want_observed", CASES)
def test_holidays(holiday, year, want_actual, want_observed):
    assert Holiday.calc(holiday, year) == (want_actual, want_observed)


def test_holiday_list():
    assert no.HOLIDAYS[5].name == "Grunnlovsdag"
    assert [Holiday.calc(h, 2015)[0] for h in no.HOLIDAYS] == [
        date(2015, 1, 1),
        date(2015, 4, 2),
        date(2015, 4, 3),
        date(2015, 4, 6),
        date(2015, 5, 1),
        date(2015, 5, 17),
        date(2015, 5, 14),
        date(2015, 5, 25),
        date(2015, 12, 25),
        date(2015, 12, 26),
    ]