"""Holiday definitions for Italy."""

from .holiday import Holiday, ObservanceType, calc_day_of_month, calc_easter_offset

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
CAPODANNO = Holiday(name="Capodanno", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Epiphany on 6-Jan
EPIFANIA = Holiday(name="Epifania", type=_PUBLIC, month=1, day=6, func=calc_day_of_month)

# Easter Monday, the day after Easter
PASQUETTA = Holiday(name="Pasquetta", type=_PUBLIC, offset=1, func=calc_easter_offset)

# Liberation Day on 25-Apr
FESTA_DELLA_LIBERAZIONE = Holiday(
    name="Festa della Liberazione", type=_PUBLIC, month=4, day=25, func=calc_day_of_month
)

# Labour Day on 1-May
FESTA_DEL_LAVORO = Holiday(
    name="Festa del Lavoro", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)

# Republic Day on 2-Jun
FESTA_DELLA_REPUBBLICA = Holiday(
    name="Festa della Repubblica", type=_PUBLIC, month=6, day=2, func=calc_day_of_month
)

# Assumption of Mary on 15-Aug
ASSUNZIONE = Holiday(name="Assunzione", type=_PUBLIC, month=8, day=15, func=calc_day_of_month)

# All Saints' Day on 1-Nov
TUTTI_I_SANTI = Holiday(
    name="Tutti i santi", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)

# Immaculate Conception on 8-Dec
IMMACOLATA = Holiday(
    name="Immacolata Concezione", type=_PUBLIC, month=12, day=8, func=calc_day_of_month
)

# Christmas Day on 25-Dec
NATALE = Holiday(name="Natale", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

# Saint Stephen's Day on 26-Dec
SANTO_STEFANO = Holiday(
    name="Santo Stefano", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

HOLIDAYS = (
    CAPODANNO,
    EPIFANIA,
    PASQUETTA,
    FESTA_DELLA_LIBERAZIONE,
    FESTA_DEL_LAVORO,
    FESTA_DELLA_REPUBBLICA,
    ASSUNZIONE,
    TUTTI_I_SANTI,
    IMMACOLATA,
    NATALE,
    SANTO_STEFANO,
)