"""Holiday definitions for Sweden."""

from .holiday import (
    Holiday,
    ObservanceType,
    Weekday,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_from,
)

_PUBLIC = ObservanceType.PUBLIC
_OTHER = ObservanceType.OTHER

# New Year's Day on 1-Jan
NYARSDAGEN = Holiday(name="Nyårsdagen", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Epiphany on 6-Jan
TRETTONDEDAG_JUL = Holiday(
    name="Trettondedag jul", type=_PUBLIC, month=1, day=6, func=calc_day_of_month
)

# Good Friday, the Friday before Easter
LANGFREDAGEN = Holiday(name="Långfredagen", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
ANNANDAG_PASK = Holiday(name="Annandag påsk", type=_PUBLIC, offset=1, func=calc_easter_offset)

# Labour Day on 1-May
FORSTA_MAJ = Holiday(name="Första Maj", type=_PUBLIC, month=5, day=1, func=calc_day_of_month)

# Ascension Day, 39 days after Easter
KRISTI_HIMMELFARDSDAG = Holiday(
    name="Kristi himmelsfärds dag", type=_PUBLIC, offset=39, func=calc_easter_offset
)

# National Day of Sweden on 6-Jun
NATIONALDAGEN = Holiday(
    name="Sveriges nationaldag", type=_PUBLIC, month=6, day=6, func=calc_day_of_month
)

# Midsummer's Eve, the first Friday from 19-Jun
MIDSOMMARAFTON = Holiday(
    name="Midsommarafton",
    type=_OTHER,
    month=6,
    day=19,
    offset=1,
    weekday=Weekday.FRIDAY,
    func=calc_weekday_from,
)

# Midsummer's Day, the first Saturday from 20-Jun
MIDSOMMARDAGEN = Holiday(
    name="Midsommardagen",
    type=_PUBLIC,
    month=6,
    day=20,
    offset=1,
    weekday=Weekday.SATURDAY,
    func=calc_weekday_from,
)

# All Saints' Day, the first Saturday from 31-Oct
ALLA_HELGONS_DAG = Holiday(
    name="Alla helgons dag",
    type=_PUBLIC,
    month=10,
    day=31,
    offset=1,
    weekday=Weekday.SATURDAY,
    func=calc_weekday_from,
)

# Christmas Eve on 24-Dec
JULAFTON = Holiday(name="Julafton", type=_OTHER, month=12, day=24, func=calc_day_of_month)

# Christmas Day on 25-Dec
JULDAGEN = Holiday(name="Juldagen", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

# Second day of Christmas on 26-Dec
ANNANDAG_JUL = Holiday(
    name="Annandag jul", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

# New Year's Eve on 31-Dec
NYARSAFTON = Holiday(name="Nyårsafton", type=_OTHER, month=12, day=31, func=calc_day_of_month)

HOLIDAYS = (
    NYARSDAGEN,
    TRETTONDEDAG_JUL,
    LANGFREDAGEN,
    ANNANDAG_PASK,
    FORSTA_MAJ,
    KRISTI_HIMMELFARDSDAG,
    NATIONALDAGEN,
    MIDSOMMARAFTON,
    MIDSOMMARDAGEN,
    ALLA_HELGONS_DAG,
    JULAFTON,
    JULDAGEN,
    ANNANDAG_JUL,
    NYARSAFTON,
)