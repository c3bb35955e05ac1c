"""Units of measure for each supported physical dimension.

Every dimension is an Enum whose members describe a linear mapping onto the
dimension's canonical base unit:

    base = value * coefficient + constant

Canonical bases:
    - Pressure: pascal
    - Temperature: kelvin
    - Speed: meters per second
    - Angle: degree
    - Length: meter

Typical usage example:
    from weatherkit.measurement.units import UnitSpeed, convert

    mps = convert(10.0, UnitSpeed.KNOTS, UnitSpeed.METERS_PER_SECOND)
"""

import math
from enum import Enum


class UnitMismatchError(TypeError):
    """Raised when units or measurements of different dimensions are mixed."""


class Dimension(Enum):
    """Base class for unit enumerations.

    Members are declared as ``(symbol, coefficient, constant)`` tuples.

    Attributes:
        symbol: Short display symbol (e.g. "hPa").
        coefficient: Multiplier from this unit to the canonical base unit.
        constant: Offset added after scaling (non-zero for temperatures).
    """

    def __init__(self, symbol: str, coefficient: float, constant: float = 0.0) -> None:
        self.symbol = symbol
        self.coefficient = coefficient
        self.constant = constant

    def to_base(self, value: float) -> float:
        """Express a value of this unit in the canonical base unit."""
        return value * self.coefficient + self.constant

    def from_base(self, value: float) -> float:
        """Express a canonical base value in this unit."""
        return (value - self.constant) / self.coefficient

    @classmethod
    def from_name(cls, name: str) -> "Dimension":
        """Look up a member by its name, ignoring case.

        Args:
            name: Member name such as "inches_of_mercury".

        Returns:
            The matching unit.

        Raises:
            KeyError: If no member has that name.
        """
        return cls[name.strip().upper()]

    def __str__(self) -> str:
        return self.symbol


class UnitPressure(Dimension):
    """Pressure units (base: pascal)."""

    PASCALS = ("Pa", 1.0)
    HECTOPASCALS = ("hPa", 100.0)
    INCHES_OF_MERCURY = ("inHg", 3386.39)


class UnitTemperature(Dimension):
    """Temperature units (base: kelvin)."""

    KELVIN = ("K", 1.0)
    CELSIUS = ("°C", 1.0, 273.15)
    FAHRENHEIT = ("°F", 5.0 / 9.0, 459.67 * 5.0 / 9.0)


class UnitSpeed(Dimension):
    """Speed units (base: meters per second)."""

    METERS_PER_SECOND = ("m/s", 1.0)
    MILES_PER_HOUR = ("mph", 0.44704)
    KILOMETERS_PER_HOUR = ("km/h", 1.0 / 3.6)
    KNOTS = ("kn", 1852.0 / 3600.0)


class UnitAngle(Dimension):
    """Angle units (base: degree)."""

    DEGREES = ("°", 1.0)
    RADIANS = ("rad", 180.0 / math.pi)


class UnitLength(Dimension):
    """Length units (base: meter)."""

    METERS = ("m", 1.0)
    KILOMETERS = ("km", 1000.0)
    FEET = ("ft", 0.3048)


def convert(value: float, source: Dimension, target: Dimension) -> float:
    """Convert a magnitude between two units of the same dimension.

    Identity conversions return ``value`` untouched; everything else goes
    through the canonical base unit.

    Args:
        value: Magnitude expressed in ``source``.
        source: Unit the value is expressed in.
        target: Unit to express the value in.

    Returns:
        Magnitude expressed in ``target``.

    Raises:
        UnitMismatchError: If the units belong to different dimensions.

    Examples:
        >>> convert(0.0, UnitTemperature.CELSIUS, UnitTemperature.KELVIN)
        273.15
    """
    if type(source) is not type(target):
        raise UnitMismatchError(
            f"Cannot convert {type(source).__name__} to {type(target).__name__}"
        )
    if source is target:
        return value
    return target.from_base(source.to_base(value))
