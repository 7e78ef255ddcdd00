"""Holiday definitions for Norway."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
FOERSTE_NYTTAARSDAG = Holiday(
    name="Første nyttårsdag", type=_PUBLIC, month=1, day=1, func=calc_day_of_month
)

# Maundy Thursday, the Thursday before Easter
SKJAERTORSDAG = Holiday(name="Skjærtorsdag", type=_PUBLIC, offset=-3, func=calc_easter_offset)

# Good Friday, the Friday before Easter
LANGFREDAG = Holiday(name="Langfredag", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Easter Monday, the day after Easter
ANDRE_PAASKEDAG = Holiday(
    name="Andre påskedag", type=_PUBLIC, offset=1, func=calc_easter_offset
)

# Labour Day on 1-May
ARBEIDERNES_DAG = Holiday(
    name="Arbeidernes dag", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)

# Constitution Day on 17-May
GRUNNLOVSDAG = Holiday(name="Grunnlovsdag", type=_PUBLIC, month=5, day=17, func=calc_day_of_month)

# Ascension Day, 39 days after Easter
KRISTI_HIMMELFARTSDAG = Holiday(
    name="Kristi Himmelfartsdag", type=_PUBLIC, offset=39, func=calc_easter_offset
)

# Pentecost Monday, 50 days after Easter
ANDRE_PINSEDAG = Holiday(name="Andre pinsedag", type=_PUBLIC, offset=50, func=calc_easter_offset)

# Christmas Day on 25-Dec
FOERSTE_JULEDAG = Holiday(
    name="Første juledag", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)

# Second day of Christmas on 26-Dec
ANDRE_JULEDAG = Holiday(
    name="Andre juledag", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    FOERSTE_NYTTAARSDAG,
    SKJAERTORSDAG,
    LANGFREDAG,
    ANDRE_PAASKEDAG,
    ARBEIDERNES_DAG,
    GRUNNLOVSDAG,
    KRISTI_HIMMELFARTSDAG,
    ANDRE_PINSEDAG,
    FOERSTE_JULEDAG,
    ANDRE_JULEDAG,
)