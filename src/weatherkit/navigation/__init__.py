"""Navigation values derived from measurements.

Typical usage:
    from weatherkit.navigation import GroundVelocity

    velocity = GroundVelocity.from_course(fix.course, fix.speed)
    if velocity is not None:
        print(velocity.speed.knots)
"""

from weatherkit.navigation.ground_velocity import GroundVelocity, LocationFix, PositionFix

__all__ = [
    "GroundVelocity",
    "LocationFix",
    "PositionFix",
]
