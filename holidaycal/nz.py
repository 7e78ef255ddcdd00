"""Holiday definitions for New Zealand."""

from .holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC
_BANK = ObservanceType.BANK

# Saturdays and Sundays both move to the following Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 1),
)

# For the second of two consecutive holidays.
_SECOND_DAY_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 2),
    AltDay(Weekday.MONDAY, 1),
)

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(
    name="New Year's Day",
    type=_PUBLIC,
    month=1,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Day after New Year's Day on 2-Jan
DAY_AFTER_NEW_YEAR = Holiday(
    name="Day after New Year's Day",
    type=_PUBLIC,
    month=1,
    day=2,
    observed=_SECOND_DAY_ALT,
    func=calc_day_of_month,
)

# Waitangi Day on 6-Feb
WAITANGI_DAY = Holiday(
    name="Waitangi Day",
    type=_PUBLIC,
    month=2,
    day=6,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Good Friday, two days before Easter
GOOD_FRIDAY = Holiday(name="Good Friday", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(name="Easter Monday", type=_PUBLIC, offset=1, func=calc_easter_offset)

# ANZAC Day on 25-Apr
ANZAC_DAY = Holiday(
    name="ANZAC Day",
    type=_PUBLIC,
    month=4,
    day=25,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Queen's Birthday on the first Monday in June
QUEENS_BIRTHDAY = Holiday(
    name="Queen's Birthday",
    type=_PUBLIC,
    month=6,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Labour Day on the fourth Monday in October
LABOUR_DAY = Holiday(
    name="Labour Day",
    type=_PUBLIC,
    month=10,
    weekday=Weekday.MONDAY,
    offset=4,
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
    observed=_SECOND_DAY_ALT,
    func=calc_day_of_month,
)

HOLIDAYS = (
    NEW_YEAR,
    DAY_AFTER_NEW_YEAR,
    WAITANGI_DAY,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    ANZAC_DAY,
    QUEENS_BIRTHDAY,
    LABOUR_DAY,
    CHRISTMAS_DAY,
    BOXING_DAY,
)