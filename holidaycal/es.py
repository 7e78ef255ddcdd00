"""Holiday definitions for Spain."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
ANO_NUEVO = Holiday(name="Año Nuevo", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Epiphany on 6-Jan
REYES = Holiday(name="Día de Reyes", type=_PUBLIC, month=1, day=6, func=calc_day_of_month)

# Good Friday, the Friday before Easter
VIERNES_SANTO = Holiday(name="Viernes Santo", type=_PUBLIC, offset=-2, func=calc_easter_offset)

# Labour Day on 1-May
TRABAJADOR = Holiday(
    name="Día del Trabajador", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)

# Assumption of Mary on 15-Aug
ASUNCION = Holiday(name="Asunción", type=_PUBLIC, month=8, day=15, func=calc_day_of_month)

# Spanish National Day on 12-Oct
FIESTA_NACIONAL_DE_ESPANA = Holiday(
    name="Fiesta Nacional de España", type=_PUBLIC, month=10, day=12, func=calc_day_of_month
)

# All Saints' Day on 1-Nov
TODOS_LOS_SANTOS = Holiday(
    name="Día de todos los Santos", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)

# Spanish Constitution Day on 6-Dec
CONSTITUCION = Holiday(
    name="Día de la Constitución", type=_PUBLIC, month=12, day=6, func=calc_day_of_month
)

# Immaculate Conception on 8-Dec
INMACULADA_CONCEPCION = Holiday(
    name="Inmaculada Concepción", type=_PUBLIC, month=12, day=8, func=calc_day_of_month
)

# Christmas Day on 25-Dec
NAVIDAD = Holiday(name="Navidad", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

HOLIDAYS = (
    ANO_NUEVO,
    REYES,
    VIERNES_SANTO,
    TRABAJADOR,
    ASUNCION,
    FIESTA_NACIONAL_DE_ESPANA,
    TODOS_LOS_SANTOS,
    CONSTITUCION,
    INMACULADA_CONCEPCION,
    NAVIDAD,
)