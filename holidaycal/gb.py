"""Holiday definitions for the United Kingdom."""

from .holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_BANK = ObservanceType.BANK

# Saturdays and Sundays both move to the following Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 1),
)

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(
    name="New Year's Day",
    type=_BANK,
    month=1,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Good Friday, two days before Easter
GOOD_FRIDAY = Holiday(name="Good Friday", type=_BANK, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(name="Easter Monday", type=_BANK, offset=1, func=calc_easter_offset)

# Early May bank holiday on the first Monday of May (moved to VE Day in 2020)
EARLY_MAY = Holiday(
    name="Early May",
    type=_BANK,
    month=5,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
    except_years=(2020,),
)

# VE Day, the 75th anniversary of the end of the Second World War
VE_DAY = Holiday(
    name="VE Day",
    type=_BANK,
    month=5,
    day=8,
    func=calc_day_of_month,
    start_year=2020,
    end_year=2020,
)

# Spring Bank Holiday on the last Monday of May
SPRING_HOLIDAY = Holiday(
    name="Spring Bank Holiday",
    type=_BANK,
    month=5,
    weekday=Weekday.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# Summer Bank Holiday in Scotland on the first Monday of August
SUMMER_HOLIDAY_SCOTLAND = Holiday(
    name="Summer Bank Holiday",
    type=_BANK,
    month=8,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Summer Bank Holiday on the last Monday of August
SUMMER_HOLIDAY = Holiday(
    name="Summer Bank Holiday",
    type=_BANK,
    month=8,
    weekday=Weekday.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Christmas Day",
    type=_BANK,
    month=12,
    day=25,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Boxing Day on 26-Dec
BOXING_DAY = Holiday(
    name="Boxing Day",
    type=_BANK,
    month=12,
    day=26,
    observed=(
        AltDay(Weekday.SATURDAY, 2),
        AltDay(Weekday.SUNDAY, 2),
        AltDay(Weekday.MONDAY, 1),
    ),
    func=calc_day_of_month,
)

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    EARLY_MAY,
    VE_DAY,
    SPRING_HOLIDAY,
    SUMMER_HOLIDAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)