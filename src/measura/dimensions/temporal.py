"""
Temporal — Time, Frequency
"""

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import GIGA, KILO, MEGA, MICRO, MILLI, NANO, TERA, UnitOfMeasure


class TimeUnit(UnitOfMeasure):
    SECONDS = ("s", 1.0)
    NANOSECONDS = ("ns", NANO)
    MICROSECONDS = ("µs", MICRO)
    MILLISECONDS = ("ms", MILLI)
    MINUTES = ("min", 60.0)
    HOURS = ("h", 3600.0)
    DAYS = ("d", 86400.0)


class Time(Quantity):
    """Время (длительность)."""

    dimension = Dimension("Time", TimeUnit, TimeUnit.SECONDS, TimeUnit.SECONDS)


class FrequencyUnit(UnitOfMeasure):
    HERTZ = ("Hz", 1.0)
    KILOHERTZ = ("kHz", KILO)
    MEGAHERTZ = ("MHz", MEGA)
    GIGAHERTZ = ("GHz", GIGA)
    TERAHERTZ = ("THz", TERA)
    REVOLUTIONS_PER_MINUTE = ("rpm", 1.0 / 60.0)


class Frequency(Quantity):
    """Частота."""

    dimension = Dimension("Frequency", FrequencyUnit, FrequencyUnit.HERTZ, FrequencyUnit.HERTZ)

    def period(self) -> Time:
        """Период колебаний 1/f в секундах (inf при f = 0)."""
        hertz = self.to_hertz()
        if hertz == 0.0:
            return Time.seconds(float("inf"))
        return Time.seconds(1.0 / hertz)
