"""Holiday definitions for Slovakia."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

# Republic Day on 1-Jan
REPUBLIC_DAY = Holiday(
    name="Deň vzniku Slovenskej republiky",
    type=_PUBLIC,
    month=1,
    day=1,
    func=calc_day_of_month,
)

# Epiphany on 6-Jan
EPIPHANY = Holiday(name="Zjavenie Pána", type=_PUBLIC, month=1, day=6, func=calc_day_of_month)

# Good Friday, two days before Easter
GOOD_FRIDAY = Holiday(
    name="Veľkonočný piatok", type=_PUBLIC, offset=-2, func=calc_easter_offset
)

# Easter Monday, the day after Easter
EASTER_MONDAY = Holiday(
    name="Veľkonočný pondelok", type=_PUBLIC, offset=1, func=calc_easter_offset
)

# Labour Day on 1-May
LABOUR_DAY = Holiday(name="Sviatok práce", type=_PUBLIC, month=5, day=1, func=calc_day_of_month)

# Liberation Day on 8-May
LIBERATION = Holiday(
    name="Deň víťazstva nad fašizmom", type=_PUBLIC, month=5, day=8, func=calc_day_of_month
)

# St. Cyril and Methodius Day on 5-Jul
SAINTS_CYRIL = Holiday(
    name="Sviatok svätého Cyrila a Metoda",
    type=_PUBLIC,
    month=7,
    day=5,
    func=calc_day_of_month,
)

# Slovak National Uprising Anniversary on 29-Aug
SNP = Holiday(
    name="Výročie Slovenského národného povstania",
    type=_PUBLIC,
    month=8,
    day=29,
    func=calc_day_of_month,
)

# Constitution Day on 1-Sep
CONSTITUTION = Holiday(
    name="Deň Ústavy Slovenskej republiky",
    type=_PUBLIC,
    month=9,
    day=1,
    func=calc_day_of_month,
)

# Day of Our Lady of the Seven Sorrows on 15-Sep
LADY_OF_SORROWS = Holiday(
    name="Sviatok Panny Márie Sedembolestnej, patrónky Slovenska",
    type=_PUBLIC,
    month=9,
    day=15,
    func=calc_day_of_month,
)

# All Saints' Day on 1-Nov
ALL_SAINTS = Holiday(
    name="Sviatok všetkých svätých", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)

# Struggle for Freedom and Democracy Day on 17-Nov
FREEDOM = Holiday(
    name="Deň boja za slobodu a demokraciu",
    type=_PUBLIC,
    month=11,
    day=17,
    func=calc_day_of_month,
)

# Christmas Eve on 24-Dec
CHRISTMAS_EVE = Holiday(name="Štedrý deň", type=_PUBLIC, month=12, day=24, func=calc_day_of_month)

# Christmas Day on 25-Dec
CHRISTMAS_DAY = Holiday(
    name="Prvý sviatok vianočný", type=_PUBLIC, month=12, day=25, func=calc_day_of_month
)

# Boxing Day on 26-Dec
SAINT_STEPHEN = Holiday(
    name="Druhý sviatok vianočný", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    REPUBLIC_DAY,
    EPIPHANY,
    GOOD_FRIDAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    LIBERATION,
    SAINTS_CYRIL,
    SNP,
    CONSTITUTION,
    LADY_OF_SORROWS,
    ALL_SAINTS,
    FREEDOM,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY,
    SAINT_STEPHEN,
)