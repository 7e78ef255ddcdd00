"""Holiday definitions for Denmark."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
NYTAARSDAG = Holiday(name="Nytårsdag", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Maundy Thursday, the Thursday before Easter
SKAERTORSDAG = Holiday(name="Skærtorsdag", type=_PUBLIC, offset=-3, func=calc_easter_offset)

# Good Friday, the Friday before Easter
LANGFREDAG = Holiday(name="Langfredag", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
ANDEN_PAASKEDAG = Holiday(name="Anden påskedag", type=_PUBLIC, offset=1, func=calc_easter_offset)

# General Prayer Day, the fourth Friday after Easter
STORE_BEDEDAG = Holiday(name="Store bededag", type=_PUBLIC, offset=26, func=calc_easter_offset)

# Ascension Day, 39 days after Easter
KRISTI_HIMMELFARTSDAG = Holiday(
    name="Kristi Himmelfartsdag", type=_PUBLIC, offset=39, func=calc_easter_offset
)

# Pentecost Monday, 50 days after Easter
ANDEN_PINSEDAG = Holiday(name="Anden Pinsedag", type=_PUBLIC, offset=50, func=calc_easter_offset)

# Constitution Day on 5-Jun
GRUNDLOVSDAG = Holiday(name="Grundlovsdag", type=_PUBLIC, month=6, day=5, func=calc_day_of_month)

# Christmas Day on 25-Dec
JULEDAG = Holiday(name="Juledag", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

# Second day of Christmas on 26-Dec
ANDEN_JULEDAG = Holiday(
    name="Anden juledag", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    NYTAARSDAG,
    SKAERTORSDAG,
    LANGFREDAG,
    ANDEN_PAASKEDAG,
    STORE_BEDEDAG,
    KRISTI_HIMMELFARTSDAG,
    ANDEN_PINSEDAG,
    GRUNDLOVSDAG,
    JULEDAG,
    ANDEN_JULEDAG,
)