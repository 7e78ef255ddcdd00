from datetime import date

import pytest

from holidaycal import es
from holidaycal.holiday import Holiday

YEARS = range(2015, 2023)

GOOD_FRIDAY = [(4, 3), (3, 25), (4, 14), (3, 30), (4, 19), (4, 10), (4, 2), (4, 15)]

FIXED = [
    (es.ANO_NUEVO, 1, 1),
    (es.REYES, 1, 6),
    (es.TRABAJADOR, 5, 1),
    (es.ASUNCION, 8, 15),
    (es.FIESTA_NACIONAL_DE_ESPANA, 10, 12),
    (es.TODOS_LOS_SANTOS, 11, 1),
    (es.CONSTITUCION, 12, 6),
    (es.INMACULADA_CONCEPCION, 12, 8),
    (es.NAVIDAD, 12, 25),
]

CASES = [
    (es.VIERNES_SANTO, y, date(y, m, d)) for y, (m, d) in zip(YEARS, GOOD_FRIDAY)
] + [(h, y, date(y, m, d)) for h, m, d in FIXED for y in YEARS]


@pytest.mark.parametrize("holiday, year, want", CASES)
def test_holidays(holiday, year, want):
    assert Holiday.calc(holiday, year) == (want, want)


def test_holiday_list():
    assert es.HOLIDAYS[0].name == "Año Nuevo"
    assert es.HOLIDAYS[-1].name == "Navidad"
    assert [Holiday.calc(h, 2015)[0] for h in es.HOLIDAYS] == [
        date(2015, 1, 1),
        date(2015, 1, 6),
        date(2015, 4, 3),
        date(2015, 5, 1),
        date(2015, 8, 15),
        date(2015, 10, 12),
        date(2015, 11, 1),
        date(2015, 12, 6),
        date(2015, 12, 8),
        date(2015, 12, 25),
    ]