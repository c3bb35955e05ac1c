"""International Standard Atmosphere helpers.

Converts static pressure into pressure altitude and flight level using the
ISA model for the troposphere and the lower stratosphere. The model is only
valid below 20 km; lower pressures are not rejected and give meaningless
results.

Typical usage example:
    from weatherkit.measurement.atmosphere import flight_level

    fl = flight_level(700.0)  # ~98.8
"""

import math

# Sea-level standard pressure (hPa) and temperature (K)
SEA_LEVEL_PRESSURE_HPA = 1013.25
SEA_LEVEL_TEMPERATURE_K = 288.15

# Tropospheric lapse rate (K/m) and g*M/(R*L)
LAPSE_RATE = 0.0065
PRESSURE_EXPONENT = 5.255876113278518

# Tropopause: 11 000 m, 226.321 hPa
TROPOPAUSE_ALTITUDE_M = 11000.0
TROPOPAUSE_PRESSURE_HPA = 226.321

# g*M/(R*T) in the isothermal layer above the tropopause (1/m)
STRATOSPHERE_SCALE = 0.00015768841327629983

METERS_PER_FOOT = 0.3048


def pressure_altitude(hectopascals: float) -> float:
    """Return the ISA altitude in meters for a static pressure.

    Args:
        hectopascals: Static pressure in hPa.

    Returns:
        Pressure altitude in meters.
    """
    if hectopascals > TROPOPAUSE_PRESSURE_HPA:
        return (
            1 - math.pow(hectopascals / SEA_LEVEL_PRESSURE_HPA, 1 / PRESSURE_EXPONENT)
        ) / (LAPSE_RATE / SEA_LEVEL_TEMPERATURE_K)
    return TROPOPAUSE_ALTITUDE_M - math.log(hectopascals / TROPOPAUSE_PRESSURE_HPA) / STRATOSPHERE_SCALE


def flight_level(hectopascals: float) -> float:
    """Return the flight level (hundreds of feet) for a static pressure.

    Args:
        hectopascals: Static pressure in hPa.

    Returns:
        Pressure altitude in hundreds of feet. Not rounded.

    Examples:
        >>> round(flight_level(1013.25), 6)
        0.0
    """
    return pressure_altitude(hectopascals) / METERS_PER_FOOT / 100
