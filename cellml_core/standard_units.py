"""
Standard Units
==============

Catalog of the standard unit names reserved by CellML, and the SI prefixes
a unit term may carry.
"""

from enum import Enum
from typing import Tuple


class StandardUnit(Enum):
    """Standard units in catalog order. The value is the reserved name."""

    AMPERE = "ampere"
    BECQUEREL = "becquerel"
    CANDELA = "candela"
    CELSIUS = "celsius"
    COULOMB = "coulomb"
    DIMENSIONLESS = "dimensionless"
    FARAD = "farad"
    GRAM = "gram"
    GRAY = "gray"
    HENRY = "henry"
    HERTZ = "hertz"
    JOULE = "joule"
    KATAL = "katal"
    KELVIN = "kelvin"
    KILOGRAM = "kilogram"
    LITER = "liter"
    LITRE = "litre"
    LUMEN = "lumen"
    LUX = "lux"
    METER = "meter"
    METRE = "metre"
    MOLE = "mole"
    NEWTON = "newton"
    OHM = "ohm"
    PASCAL = "pascal"
    RADIAN = "radian"
    SECOND = "second"
    SIEMENS = "siemens"
    SIEVERT = "sievert"
    STERADIAN = "steradian"
    TESLA = "tesla"
    VOLT = "volt"
    WATT = "watt"
    WEBER = "weber"


STANDARD_UNIT_NAMES: Tuple[str, ...] = tuple(unit.value for unit in StandardUnit)

# Prefix name -> power of ten
SI_PREFIXES = {
    "yotta": 24,
    "zetta": 21,
    "exa": 18,
    "peta": 15,
    "tera": 12,
    "giga": 9,
    "mega": 6,
    "kilo": 3,
    "hecto": 2,
    "deca": 1,
    "deci": -1,
    "centi": -2,
    "milli": -3,
    "micro": -6,
    "nano": -9,
    "pico": -12,
    "femto": -15,
    "atto": -18,
    "zepto": -21,
    "yocto": -24,
}


def standard_unit_name(unit: StandardUnit) -> str:
    """Return the reserved name of a standard unit."""
    return unit.value


def is_standard_unit(name: str) -> bool:
    """
    Check whether a name is one of the reserved standard unit names.

    The comparison is exact and case-sensitive, so "Ampere" is not reserved.

    Args:
        name: Candidate units name

    Returns:
        True if the name is reserved
    """
    return name in STANDARD_UNIT_NAMES
