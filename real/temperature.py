#
# Real - Temperature
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
from dataclasses import dataclass
from enum import StrEnum, unique


# @formatter:off

class TemperatureConf:
    DEFAULT_PRECISION = 2       # Fraction digits when format() gets no precision
    NAN_STRING = "0"            # str() of a NaN temperature


temperature_conf = TemperatureConf()

# @formatter:on

_FORMAT_SPEC = re.compile(r"(?:\.(?P<precision>[0-9]+))?(?P<verb>[KCFf])")


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class TemperatureUnit(StrEnum):
    """
    Temperature scales.

    Attributes:
        KELVIN (str)     : K
        CELSIUS (str)    : °C
        FAHRENHEIT (str) : °F
    """
    KELVIN = "K"
    CELSIUS = "°C"
    FAHRENHEIT = "°F"


@dataclass(frozen=True, order=True)
class Temperature:
    """
    Real-life temperature stored in kelvin.

    Format verbs: K, C, F and f (alias for C), with optional precision:

        >>> f"{celsius(21.5):.1F}"
        '70.7 °F'
        >>> str(BOILING)
        '100.00 °C'
    """

    kelvin: float

    def __post_init__(self):
        if isinstance(self.kelvin, bool) or not isinstance(self.kelvin, (int, float)):
            raise TypeError(f"kelvin must be int | float, got {type(self.kelvin).__name__}")
        object.__setattr__(self, 'kelvin', float(self.kelvin))

    def in_unit(self, unit: TemperatureUnit) -> float:
        """
        Temperature value in the given scale.

        Raises:
            AssertionError: If unit is not a TemperatureUnit member.
        """
        if not isinstance(unit, TemperatureUnit):
            raise AssertionError(f"invalid temperature unit: {unit!r}")

        if unit == TemperatureUnit.KELVIN:
            return self.kelvin
        if unit == TemperatureUnit.FAHRENHEIT:
            return (self.kelvin - FREEZING.kelvin) * 9 / 5 + 32
        return self.kelvin - FREEZING.kelvin

    @property
    def celsius(self) -> float:
        return self.in_unit(TemperatureUnit.CELSIUS)

    @property
    def fahrenheit(self) -> float:
        return self.in_unit(TemperatureUnit.FAHRENHEIT)

    def __format__(self, format_spec: str) -> str:
        match = _FORMAT_SPEC.fullmatch(format_spec)
        if match is None:
            return str(self)

        precision = match.group("precision")
        precision = temperature_conf.DEFAULT_PRECISION if precision is None else int(precision)
        unit = _VERB_UNITS[match.group("verb")]
        return f"{self.in_unit(unit):.{precision}f} {unit}"

    def __str__(self) -> str:
        if math.isnan(self.kelvin):
            return temperature_conf.NAN_STRING
        return format(self, "C")


# Methods --------------------------------------------------------------------------------------------------------------

def kelvin(t: float) -> Temperature:
    return Temperature(float(t))


def celsius(t: float) -> Temperature:
    return Temperature(float(t) + FREEZING.kelvin)


def fahrenheit(t: float) -> Temperature:
    return Temperature((float(t) - 32) * 5 / 9 + FREEZING.kelvin)


# Constants ------------------------------------------------------------------------------------------------------------

ABSOLUTE_ZERO = Temperature(0.0)
FREEZING = Temperature(273.15)
BOILING = Temperature(373.15)

_VERB_UNITS = {
    "K": TemperatureUnit.KELVIN,
    "C": TemperatureUnit.CELSIUS,
    "f": TemperatureUnit.CELSIUS,
    "F": TemperatureUnit.FAHRENHEIT,
}
