"""Holiday definitions for Ukraine."""

from .holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# Saturdays and Sundays both move to the following Monday.
_WEEKEND_ALT = (
    AltDay(Weekday.SATURDAY, 2),
    AltDay(Weekday.SUNDAY, 1),
)

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(
    name="Новий Рік",
    type=_PUBLIC,
    month=1,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Orthodox Christmas on 7-Jan
ORTHODOX_CHRISTMAS = Holiday(
    name="Різдво",
    type=_PUBLIC,
    month=1,
    day=7,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# International Women's Day on 8-Mar
WOMENS_DAY = Holiday(
    name="Міжнародний жіночий день",
    type=_PUBLIC,
    month=3,
    day=8,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Orthodox Easter Monday, the day after Julian Easter
ORTHODOX_EASTER_MONDAY = Holiday(
    name="Великдень",
    type=_PUBLIC,
    offset=1,
    julian=True,
    func=calc_easter_offset,
)

# Labour Day on 1-May
LABOUR_DAY = Holiday(
    name="День праці",
    type=_PUBLIC,
    month=5,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Second Labour Day on 2-May, observed until 2017
LABOUR_DAY_2 = Holiday(
    name="День праці",
    type=_PUBLIC,
    month=5,
    day=2,
    observed=_WEEKEND_ALT,
    end_year=2017,
    func=calc_day_of_month,
)

# Victory Day on 9-May
VICTORY_DAY = Holiday(
    name="День перемоги над нацизмом у Другій світовій війні",
    type=_PUBLIC,
    month=5,
    day=9,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Orthodox Pentecost, 49 days after Julian Easter
ORTHODOX_PENTECOST_MONDAY = Holiday(
    name="Трійця",
    type=_PUBLIC,
    offset=49,
    julian=True,
    func=calc_easter_offset,
)

# Constitution Day on 28-Jun
CONSTITUTION_DAY = Holiday(
    name="День Конституції",
    type=_PUBLIC,
    month=6,
    day=28,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Independence Day on 24-Aug
INDEPENDENCE_DAY = Holiday(
    name="День Незалежності",
    type=_PUBLIC,
    month=8,
    day=24,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Defender of Ukraine Day on 14-Oct, from 2015
DEFENDER_OF_UKRAINE_DAY = Holiday(
    name="День захисника України",
    type=_PUBLIC,
    start_year=2015,
    month=10,
    day=14,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Christmas Day on 25-Dec
CATHOLIC_CHRISTMAS = Holiday(
    name="Різдво", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)

HOLIDAYS = (
    NEW_YEAR,
    ORTHODOX_CHRISTMAS,
    WOMENS_DAY,
    ORTHODOX_EASTER_MONDAY,
    LABOUR_DAY,
    LABOUR_DAY_2,
    VICTORY_DAY,
    ORTHODOX_PENTECOST_MONDAY,
    CONSTITUTION_DAY,
    INDEPENDENCE_DAY,
    DEFENDER_OF_UKRAINE_DAY,
    CATHOLIC_CHRISTMAS,
)