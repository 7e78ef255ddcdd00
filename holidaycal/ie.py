"""Holiday definitions for the Republic of Ireland."""

from .holiday import (
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(name="New Year's Day", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Saint Patrick's Day on 17-Mar
SAINT_PATRICK_DAY = Holiday(
    name="Saint Patrick's Day", month=3, day=17, func=calc_day_of_month
)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(name="Easter Monday", type=_PUBLIC, offset=1, func=calc_easter_offset)

# The first Monday in May
FIRST_MONDAY_MAY = Holiday(
    name="First Monday in May",
    month=5,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# The first Monday in June
FIRST_MONDAY_JUNE = Holiday(
    name="First Monday in June",
    month=6,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# The first Monday in August
FIRST_MONDAY_AUGUST = Holiday(
    name="First Monday in August",
    month=8,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# The last Monday in October
LAST_MONDAY_IN_OCTOBER = Holiday(
    name="Last Monday in October",
    type=_PUBLIC,
    month=10,
    weekday=Weekday.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Christmas Day", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)

# Saint Stephen's Day on 26-Dec
SAINT_STEPHEN_DAY = Holiday(
    name="Saint Stephen's Day", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    NEW_YEAR,
    SAINT_PATRICK_DAY,
    EASTER_MONDAY,
    FIRST_MONDAY_MAY,
    FIRST_MONDAY_JUNE,
    FIRST_MONDAY_AUGUST,
    LAST_MONDAY_IN_OCTOBER,
    CHRISTMAS_DAY,
    SAINT_STEPHEN_DAY,
)