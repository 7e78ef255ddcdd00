"""Holiday definitions for South Africa."""

from .holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC
_BANK = ObservanceType.BANK

# Sundays move to Monday.
_WEEKEND_ALT = (AltDay(Weekday.SUNDAY, 1),)

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(
    name="New Year's Day",
    type=_PUBLIC,
    month=1,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Human Rights Day on 21-Mar
HUMAN_RIGHTS_DAY = Holiday(
    name="Human Rights Day",
    type=_PUBLIC,
    month=3,
    day=21,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Good Friday, two days before Easter
GOOD_FRIDAY = Holiday(name="Good Friday", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Family Day, the Monday after Easter
FAMILY_DAY = Holiday(name="Family Day", type=_PUBLIC, offset=1, func=calc_easter_offset)

# Freedom Day on 27-Apr
FREEDOM_DAY = Holiday(
    name="Freedom Day",
    type=_PUBLIC,
    month=4,
    day=27,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Workers' Day on 1-May
WORKERS_DAY = Holiday(
    name="Workers' Day",
    type=_PUBLIC,
    month=5,
    day=1,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Youth Day on 16-Jun
YOUTH_DAY = Holiday(
    name="Youth Day",
    type=_PUBLIC,
    month=6,
    day=16,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# National Women's Day on 9-Aug
WOMENS_DAY = Holiday(
    name="National Women's Day",
    type=_PUBLIC,
    month=8,
    day=9,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Heritage Day on 24-Sep
HERITAGE_DAY = Holiday(
    name="Heritage Day",
    type=_PUBLIC,
    month=9,
    day=24,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
)

# Day of Reconciliation on 16-Dec
RECONCILIATION_DAY = Holiday(
    name="Reconciliation Day",
    type=_PUBLIC,
    month=12,
    day=16,
    observed=_WEEKEND_ALT,
    func=calc_day_of_month,
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

# Day of Goodwill on 26-Dec
GOODWILL_DAY = Holiday(
    name="Day of Goodwill",
    type=_BANK,
    month=12,
    day=26,
    observed=(
        AltDay(Weekday.SUNDAY, 1),
        AltDay(Weekday.MONDAY, 1),
    ),
    func=calc_day_of_month,
)

HOLIDAYS = (
    NEW_YEAR,
    HUMAN_RIGHTS_DAY,
    GOOD_FRIDAY,
    FAMILY_DAY,
    FREEDOM_DAY,
    WORKERS_DAY,
    YOUTH_DAY,
    WOMENS_DAY,
    HERITAGE_DAY,
    RECONCILIATION_DAY,
    CHRISTMAS_DAY,
    GOODWILL_DAY,
)