"""Holiday definitions for the United States of America."""

from .holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_weekday_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# Saturdays move to Friday, Sundays move to Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, -1),
    AltDay(Weekday.SUNDAY, 1),
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

# Martin Luther King Jr. Day on the third Monday in January
MLK_DAY = Holiday(
    name="Martin Luther King Jr. Day",
    type=_PUBLIC,
    month=1,
    weekday=Weekday.MONDAY,
    offset=3,
    func=calc_weekday_offset,
)

# Presidents' Day on the third Monday in February
PRESIDENTS_DAY = Holiday(
    name="Presidents' Day",
    type=_PUBLIC,
    month=2,
    weekday=Weekday.MONDAY,
    offset=3,
    func=calc_weekday_offset,
)

# Memorial Day on the last Monday in May
MEMORIAL_DAY = Holiday(
    name="Memorial Day",
    type=_PUBLIC,
    month=5,
    weekday=Weekday.MONDAY,
    offset=-1,
    func=calc_weekday_offset,
)

# Independence Day on 4-Jul
INDEPENDENCE_DAY = Holiday(
    name="Independence Day",
    type=_PUBLIC,
    month=7,
    day=4,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Labor Day on the first Monday in September
LABOR_DAY = Holiday(
    name="Labor Day",
    type=_PUBLIC,
    month=9,
    weekday=Weekday.MONDAY,
    offset=1,
    func=calc_weekday_offset,
)

# Columbus Day on the second Monday in October
COLUMBUS_DAY = Holiday(
    name="Columbus Day",
    type=_PUBLIC,
    month=10,
    weekday=Weekday.MONDAY,
    offset=2,
    func=calc_weekday_offset,
)

# Veterans Day on 11-Nov
VETERANS_DAY = Holiday(
    name="Veterans Day",
    type=_PUBLIC,
    month=11,
    day=11,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Thanksgiving Day on the fourth Thursday in November
THANKSGIVING_DAY = Holiday(
    name="Thanksgiving Day",
    type=_PUBLIC,
    month=11,
    weekday=Weekday.THURSDAY,
    offset=4,
    func=calc_weekday_offset,
)

# The day after Thanksgiving Day
DAY_AFTER_THANKSGIVING_DAY = Holiday(
    name="Day After Thanksgiving Day",
    type=_PUBLIC,
    month=11,
    weekday=Weekday.THURSDAY,
    offset=4,
    calc_offset=1,
    func=calc_weekday_offset,
)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Christmas Day",
    type=_PUBLIC,
    month=12,
    day=25,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

HOLIDAYS = (
    NEW_YEAR,
    MLK_DAY,
    PRESIDENTS_DAY,
    MEMORIAL_DAY,
    INDEPENDENCE_DAY,
    LABOR_DAY,
    COLUMBUS_DAY,
    VETERANS_DAY,
    THANKSGIVING_DAY,
    CHRISTMAS_DAY,
)