"""Measurements: a magnitude tagged with a unit of measure.

This module provides the generic Measurement value type and one subclass per
supported dimension with named constructors and accessors.

Typical usage example:
    from weatherkit.measurement import Pressure, Temperature

    qnh = Pressure.from_inches_of_mercury(29.92)
    print(qnh.hectopascals)  # 1013.2
    print(Temperature.from_celsius(15.0).fahrenheit)  # 59.0
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Generic, TypeVar

from weatherkit.measurement import atmosphere
from weatherkit.measurement.units import (
    Dimension,
    UnitAngle,
    UnitLength,
    UnitMismatchError,
    UnitPressure,
    UnitSpeed,
    UnitTemperature,
    convert,
)

U = TypeVar("U", bound=Dimension)
M = TypeVar("M", bound="Measurement[Any]")


@total_ordering
@dataclass(frozen=True, eq=False)
class Measurement(Generic[U]):
    """Immutable magnitude with a unit of measure.

    Values are stored as given; no range checks are done (negative kelvin or
    negative speeds are accepted). Equality, hashing and ordering compare the
    values after conversion to the dimension's canonical base unit.

    Attributes:
        value: Magnitude expressed in ``unit``.
        unit: Unit of measure.

    Examples:
        >>> m = Measurement(10.0, UnitSpeed.KNOTS)
        >>> m.value_in(UnitSpeed.METERS_PER_SECOND)
        5.144444444444445
    """

    value: float
    unit: U

    # Unit enumeration accepted by a dimension-specific subclass
    unit_type: ClassVar[type[Dimension]] = Dimension

    def __post_init__(self) -> None:
        if not isinstance(self.unit, self.unit_type):
            raise UnitMismatchError(
                f"{type(self).__name__} requires a {self.unit_type.__name__} unit, got {self.unit!r}"
            )

    def value_in(self: "Measurement[U]", unit: U) -> float:
        """Return the magnitude expressed in another unit of the same dimension.

        Args:
            unit: Target unit.

        Returns:
            Converted magnitude. Exactly ``value`` when ``unit`` is the
            measurement's own unit.

        Raises:
            UnitMismatchError: If ``unit`` belongs to another dimension.
        """
        return convert(self.value, self.unit, unit)

    def converted(self: M, unit: Any) -> M:
        """Return an equivalent measurement expressed in ``unit``.

        Args:
            unit: Target unit.

        Returns:
            New measurement of the same class.
        """
        return type(self)(self.value_in(unit), unit)

    @property
    def base_value(self) -> float:
        """Magnitude in the canonical base unit of the dimension."""
        return self.unit.to_base(self.value)

    def _same_dimension(self, other: "Measurement[Any]") -> bool:
        return type(self.unit) is type(other.unit)

    def _require_same_dimension(self, other: "Measurement[Any]") -> None:
        if not self._same_dimension(other):
            raise UnitMismatchError(
                f"Cannot combine {type(self.unit).__name__} with {type(other.unit).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return self._same_dimension(other) and self.base_value == other.base_value

    def __lt__(self, other: "Measurement[Any]") -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._require_same_dimension(other)
        return self.base_value < other.base_value

    def __hash__(self) -> int:
        return hash((type(self.unit), self.base_value))

    def __add__(self: M, other: M) -> M:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._require_same_dimension(other)
        return type(self)(self.value + other.value_in(self.unit), self.unit)

    def __sub__(self: M, other: M) -> M:
        if not isinstance(other, Measurement):
            return NotImplemented
        self._require_same_dimension(other)
        return type(self)(self.value - other.value_in(self.unit), self.unit)

    def __mul__(self: M, scalar: float) -> M:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return type(self)(self.value * scalar, self.unit)

    def __rmul__(self: M, scalar: float) -> M:
        return self.__mul__(scalar)

    def __truediv__(self: M, scalar: float) -> M:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return type(self)(self.value / scalar, self.unit)

    def __neg__(self: M) -> M:
        return type(self)(-self.value, self.unit)

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.symbol}"


class Pressure(Measurement[UnitPressure]):
    """Static or barometric pressure.

    Examples:
        >>> Pressure.from_hectopascals(1013.25).inches_of_mercury
        29.921...
    """

    unit_type = UnitPressure

    @classmethod
    def from_hectopascals(cls, hectopascals: float) -> "Pressure":
        return cls(hectopascals, UnitPressure.HECTOPASCALS)

    @classmethod
    def from_inches_of_mercury(cls, inches_of_mercury: float) -> "Pressure":
        return cls(inches_of_mercury, UnitPressure.INCHES_OF_MERCURY)

    @property
    def hectopascals(self) -> float:
        return self.value_in(UnitPressure.HECTOPASCALS)

    @property
    def inches_of_mercury(self) -> float:
        return self.value_in(UnitPressure.INCHES_OF_MERCURY)

    @property
    def flight_level(self) -> float:
        """Hundreds of feet, by the International Standard Atmosphere.

        Only correct below 20 km; lower pressures give meaningless values.
        """
        return atmosphere.flight_level(self.hectopascals)

    @property
    def pressure_altitude(self) -> "Length":
        """ISA altitude for this pressure (below 20 km)."""
        return Length.from_meters(atmosphere.pressure_altitude(self.hectopascals))


class Temperature(Measurement[UnitTemperature]):
    """Temperature."""

    unit_type = UnitTemperature

    @classmethod
    def from_kelvin(cls, kelvin: float) -> "Temperature":
        return cls(kelvin, UnitTemperature.KELVIN)

    @classmethod
    def from_celsius(cls, celsius: float) -> "Temperature":
        return cls(celsius, UnitTemperature.CELSIUS)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> "Temperature":
        return cls(fahrenheit, UnitTemperature.FAHRENHEIT)

    @property
    def kelvin(self) -> float:
        return self.value_in(UnitTemperature.KELVIN)

    @property
    def celsius(self) -> float:
        return self.value_in(UnitTemperature.CELSIUS)

    @property
    def fahrenheit(self) -> float:
        return self.value_in(UnitTemperature.FAHRENHEIT)


class Speed(Measurement[UnitSpeed]):
    """Speed."""

    unit_type = UnitSpeed

    @classmethod
    def from_meters_per_second(cls, meters_per_second: float) -> "Speed":
        return cls(meters_per_second, UnitSpeed.METERS_PER_SECOND)

    @classmethod
    def from_miles_per_hour(cls, miles_per_hour: float) -> "Speed":
        return cls(miles_per_hour, UnitSpeed.MILES_PER_HOUR)

    @classmethod
    def from_kilometers_per_hour(cls, kilometers_per_hour: float) -> "Speed":
        return cls(kilometers_per_hour, UnitSpeed.KILOMETERS_PER_HOUR)

    @classmethod
    def from_knots(cls, knots: float) -> "Speed":
        return cls(knots, UnitSpeed.KNOTS)

    @property
    def meters_per_second(self) -> float:
        return self.value_in(UnitSpeed.METERS_PER_SECOND)

    @property
    def miles_per_hour(self) -> float:
        return self.value_in(UnitSpeed.MILES_PER_HOUR)

    @property
    def kilometers_per_hour(self) -> float:
        return self.value_in(UnitSpeed.KILOMETERS_PER_HOUR)

    @property
    def knots(self) -> float:
        return self.value_in(UnitSpeed.KNOTS)


class Angle(Measurement[UnitAngle]):
    """Plane angle. Not normalized to any range."""

    unit_type = UnitAngle

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees, UnitAngle.DEGREES)

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians, UnitAngle.RADIANS)

    @property
    def degrees(self) -> float:
        return self.value_in(UnitAngle.DEGREES)

    @property
    def radians(self) -> float:
        return self.value_in(UnitAngle.RADIANS)


class Length(Measurement[UnitLength]):
    """Length, distance or altitude."""

    unit_type = UnitLength

    @classmethod
    def from_meters(cls, meters: float) -> "Length":
        return cls(meters, UnitLength.METERS)

    @classmethod
    def from_kilometers(cls, kilometers: float) -> "Length":
        return cls(kilometers, UnitLength.KILOMETERS)

    @classmethod
    def from_feet(cls, feet: float) -> "Length":
        return cls(feet, UnitLength.FEET)

    @classmethod
    def from_hundreds_of_feet(cls, hundreds_of_feet: float) -> "Length":
        """Create a length from hundreds of feet (e.g. a flight level).

        Stored as ``hundreds_of_feet * 100`` feet.
        """
        return cls(hundreds_of_feet * 100, UnitLength.FEET)

    @property
    def meters(self) -> float:
        return self.value_in(UnitLength.METERS)

    @property
    def kilometers(self) -> float:
        return self.value_in(UnitLength.KILOMETERS)

    @property
    def feet(self) -> float:
        return self.value_in(UnitLength.FEET)
