"""Holiday definitions for the Netherlands."""

from .holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
NIEUWJAAR = Holiday(name="Nieuwjaarsdag", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Good Friday, the Friday before Easter
GOEDE_VRIJDAG = Holiday(name="Goede Vrijdag", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
TWEEDE_PAASDAG = Holiday(name="Tweede Paasdag", type=_PUBLIC, offset=1, func=calc_easter_offset)

# King's Day on 27-Apr, moved to Saturday when it falls on a Sunday
KONINGSDAG = Holiday(
    name="Koningsdag",
    month=4,
    day=27,
    func=calc_day_of_month,
    observed=(AltDay(Weekday.SUNDAY, -1),),
)

# Liberation Day on 5-May
BEVRIJDINGSDAG = Holiday(name="Bevrijdingsdag", month=5, day=5, func=calc_day_of_month)

# Ascension Day, 39 days after Easter
HEMELVAART = Holiday(name="Hemelvaartsdag", type=_PUBLIC, offset=39, func=calc_easter_offset)

# Pentecost Monday, 50 days after Easter
TWEEDE_PINKSTERDAG = Holiday(
    name="Tweede Pinksterdag", type=_PUBLIC, offset=50, func=calc_easter_offset
)

# Christmas Day on 25-Dec
EERSTE_KERSTDAG = Holiday(
    name="Eerste Kerstdag", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)

# Boxing Day on 26-Dec
TWEEDE_KERSTDAG = Holiday(
    name="Tweede Kerstdag", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    NIEUWJAAR,
    GOEDE_VRIJDAG,
    TWEEDE_PAASDAG,
    KONINGSDAG,
    BEVRIJDINGSDAG,
    HEMELVAART,
    TWEEDE_PINKSTERDAG,
    EERSTE_KERSTDAG,
    TWEEDE_KERSTDAG,
)