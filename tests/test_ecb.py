from datetime import date

import pytest

from holidaycal import ecb
from holidaycal.holiday import Holiday, ObservanceType

YEARS = range(2015, 2023)

MOVABLE = [
    (ecb.GOOD_FRIDAY, [(4, 3), (3, 25), (4, 14), (3, 30), (4, 19), (4, 10), (4, 2), (4, 15)]),
    (ecb.EASTER_MONDAY, [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)]),
]

FIXED = [
    (ecb.NEW_YEAR, 1, 1),
    (ecb.LABOUR_DAY, 5, 1),
    (ecb.CHRISTMAS_DAY, 12, 25),
    (ecb.CHRISTMAS_HOLIDAY, 12, 26),
]

CASES = [
    (h, y, date(y, m, d)) for h, dates in MOVABLE for y, (m, d) in zip(YEARS, dates)
] + [(h, y, date(y, m, d)) for h, m, d in FIXED for y in YEARS]


@pytest.mark.parametrize("holiday, year, want", CASES)
def test_holidays(holiday, year, want):
    assert Holiday.calc(holiday, year) == (want, want)


def test_all_are_bank_holidays():
    assert {h.type for h in ecb.HOLIDAYS} == {ObservanceType.BANK}
    assert [Holiday.calc(h, 2015)[0] for h in ecb.HOLIDAYS] == [
        date(2015, 1, 1),
        date(2015, 4, 3),
        date(2015, 4, 6),
        date(2015, 5, 1),
        date(2015, 12, 25),
        date(2015, 12, 26),
    ]