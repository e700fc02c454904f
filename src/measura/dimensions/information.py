"""
Information — Information, DataRate

Primary-единица — байт. Десятичные (KB = 1000 B) и двоичные (KiB = 1024 B)
кратные различаются явно.
"""

from measura.core.dimension import Dimension
from measura.core.quantity import Quantity
from measura.core.unit import (
    EXA,
    EXBI,
    GIBI,
    GIGA,
    KIBI,
    KILO,
    MEBI,
    MEGA,
    PEBI,
    PETA,
    TEBI,
    TERA,
    UnitOfMeasure,
)

BITS_PER_BYTE = 8.0


class InformationUnit(UnitOfMeasure):
    BYTES = ("B", 1.0)
    BITS = ("bit", 1.0 / BITS_PER_BYTE)
    KILOBYTES = ("KB", KILO)
    MEGABYTES = ("MB", MEGA)
    GIGABYTES = ("GB", GIGA)
    TERABYTES = ("TB", TERA)
    PETABYTES = ("PB", PETA)
    EXABYTES = ("EB", EXA)
    KIBIBYTES = ("KiB", KIBI)
    MEBIBYTES = ("MiB", MEBI)
    GIBIBYTES = ("GiB", GIBI)
    TEBIBYTES = ("TiB", TEBI)
    PEBIBYTES = ("PiB", PEBI)
    EXBIBYTES = ("EiB", EXBI)
    KILOBITS = ("Kbit", KILO / BITS_PER_BYTE)
    MEGABITS = ("Mbit", MEGA / BITS_PER_BYTE)
    GIGABITS = ("Gbit", GIGA / BITS_PER_BYTE)
    TERABITS = ("Tbit", TERA / BITS_PER_BYTE)


class Information(Quantity):
    """Объём информации."""

    dimension = Dimension(
        "Information", InformationUnit, InformationUnit.BYTES, InformationUnit.BYTES
    )


class DataRateUnit(UnitOfMeasure):
    BYTES_PER_SECOND = ("B/s", 1.0)
    BITS_PER_SECOND = ("bps", 1.0 / BITS_PER_BYTE)
    KILOBYTES_PER_SECOND = ("KB/s", KILO)
    MEGABYTES_PER_SECOND = ("MB/s", MEGA)
    GIGABYTES_PER_SECOND = ("GB/s", GIGA)
    KILOBITS_PER_SECOND = ("Kbps", KILO / BITS_PER_BYTE)
    MEGABITS_PER_SECOND = ("Mbps", MEGA / BITS_PER_BYTE)
    GIGABITS_PER_SECOND = ("Gbps", GIGA / BITS_PER_BYTE)


class DataRate(Quantity):
    """Скорость передачи данных."""

    dimension = Dimension(
        "DataRate", DataRateUnit, DataRateUnit.BYTES_PER_SECOND, DataRateUnit.BYTES_PER_SECOND
    )
