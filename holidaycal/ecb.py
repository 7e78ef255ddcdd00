"""Holiday definitions for the European Central Bank."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_BANK = ObservanceType.BANK

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(name="New Year's Day", type=_BANK, month=1, day=1, func=calc_day_of_month)

# Good Friday, two days before Easter
GOOD_FRIDAY = Holiday(name="Good Friday", type=_BANK, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(name="Easter Monday", type=_BANK, offset=1, func=calc_easter_offset)

# Labour Day on 1-May
LABOUR_DAY = Holiday(name="Labour Day", type=_BANK, month=5, day=1, func=calc_day_of_month)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Christmas Day", type=_BANK, month=12, day=25, func=calc_day_of_month
)

# The day after Christmas on 26-Dec
CHRISTMAS_HOLIDAY = Holiday(
    name="Christmas Holiday", type=_BANK, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    NEW_YEAR,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    CHRISTMAS_DAY,
    CHRISTMAS_HOLIDAY,
)