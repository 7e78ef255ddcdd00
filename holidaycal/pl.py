"""Holiday definitions for Poland."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(name="Nowy Rok", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Epiphany on 6-Jan
THREE_KINGS = Holiday(
    name="Święto Trzech Króli", type=_PUBLIC, month=1, day=6, func=calc_day_of_month
)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(
    name="drugi dzień Wielkiej Nocy", type=_PUBLIC, offset=1, func=calc_easter_offset
)

# Labour Day on 1-May
LABOUR_DAY = Holiday(
    name="Święto Państwowe", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)

# Constitution Day on 3-May
CONSTITUTION_DAY = Holiday(
    name="Święto Narodowe Trzeciego Maja",
    type=_PUBLIC,
    month=5,
    day=3,
    func=calc_day_of_month,
)

# Corpus Christi, 60 days after Easter
CORPUS_CHRISTI = Holiday(
    name="dzień Bożego Ciała", type=_PUBLIC, offset=60, func=calc_easter_offset
)

# Assumption of Mary on 15-Aug
ASSUMPTION_BLESSED_VIRGIN_MARY = Holiday(
    name="Wniebowzięcie Najświętszej Maryi Panny",
    type=_PUBLIC,
    month=8,
    day=15,
    func=calc_day_of_month,
)

# All Saints' Day on 1-Nov
ALL_SAINTS = Holiday(
    name="Wszystkich Świętych", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)

# National Independence Day on 11-Nov
NATIONAL_INDEPENDENCE_DAY = Holiday(
    name="Narodowe Święto Niepodległości",
    type=_PUBLIC,
    month=11,
    day=11,
    func=calc_day_of_month,
)

# Christmas Day on 25-Dec
CHRISTMAS_DAY_ONE = Holiday(
    name="pierwszy dzień Bożego Narodzenia",
    type=_PUBLIC,
    month=12,
    day=25,
    func=calc_day_of_month,
)

# Second day of Christmas on 26-Dec
CHRISTMAS_DAY_TWO = Holiday(
    name="drugi dzień Bożego Narodzenia",
    type=_PUBLIC,
    month=12,
    day=26,
    func=calc_day_of_month,
)

HOLIDAYS = (
    NEW_YEAR,
    THREE_KINGS,
    EASTER_MONDAY,
    LABOUR_DAY,
    CONSTITUTION_DAY,
    CORPUS_CHRISTI,
    ASSUMPTION_BLESSED_VIRGIN_MARY,
    ALL_SAINTS,
    NATIONAL_INDEPENDENCE_DAY,
    CHRISTMAS_DAY_ONE,
    CHRISTMAS_DAY_TWO,
)