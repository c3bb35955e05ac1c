"""Typed measurements for weather and aviation quantities.

This module provides measurements of pressure, temperature, speed, angle and
length with named constructors and accessors for each supported unit.

Typical usage:
    from weatherkit.measurement import Pressure, Speed

    qnh = Pressure.from_hectopascals(1013.25)
    print(qnh.inches_of_mercury, qnh.flight_level)
    print(Speed.from_knots(100.0).meters_per_second)
"""

from weatherkit.measurement.measurement import (
    Angle,
    Length,
    Measurement,
    Pressure,
    Speed,
    Temperature,
)
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

__all__ = [
    "Angle",
    "Dimension",
    "Length",
    "Measurement",
    "Pressure",
    "Speed",
    "Temperature",
    "UnitAngle",
    "UnitLength",
    "UnitMismatchError",
    "UnitPressure",
    "UnitSpeed",
    "UnitTemperature",
    "convert",
]
