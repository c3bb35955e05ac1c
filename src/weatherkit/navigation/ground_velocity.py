"""Ground velocity: azimuth and speed over the ground.

Typical usage example:
    from weatherkit.navigation import GroundVelocity, LocationFix

    velocity = GroundVelocity.from_values(90.0, 51.4)
    from_gps = GroundVelocity.from_location(LocationFix(course=-1.0, speed=0.0))
    assert from_gps is None  # course unavailable
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from weatherkit.measurement import Angle, Speed
from weatherkit.physics.vectors import Vector3

logger = logging.getLogger(__name__)


class PositionFix(Protocol):
    """Anything reporting a course and a speed, such as a GNSS receiver fix.

    Attributes:
        course: Course over ground in degrees from true north. Negative when
            the receiver has no valid course.
        speed: Speed over ground in meters per second.
    """

    course: float
    speed: float


@dataclass(frozen=True)
class LocationFix:
    """A positioning fix as reported by a location provider.

    Attributes:
        course: Course over ground in degrees; negative means invalid.
        speed: Speed over ground in meters per second; negative means invalid.
        latitude: Latitude in degrees (optional).
        longitude: Longitude in degrees (optional).
        altitude: Altitude in meters (optional).

    Examples:
        >>> fix = LocationFix(course=270.0, speed=12.5, latitude=35.68, longitude=139.77)
    """

    course: float
    speed: float
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None


@dataclass(frozen=True)
class GroundVelocity:
    """Direction and speed of movement over the ground.

    The azimuth is kept exactly as given; it is not normalized to [0, 360).

    Attributes:
        azimuth: Direction of movement, clockwise from true north.
        speed: Speed over the ground.

    Examples:
        >>> v = GroundVelocity(Angle.from_degrees(45.0), Speed.from_knots(120.0))
        >>> v2 = GroundVelocity.from_values(45.0, 61.7)
    """

    azimuth: Angle
    speed: Speed

    @classmethod
    def from_values(cls, azimuth_degrees: float, meters_per_second: float) -> "GroundVelocity":
        """Create from an azimuth in degrees and a speed in meters per second."""
        return cls(Angle.from_degrees(azimuth_degrees), Speed.from_meters_per_second(meters_per_second))

    @classmethod
    def from_azimuth(cls, azimuth_degrees: float, speed: Speed) -> "GroundVelocity":
        """Create from an azimuth in degrees and a typed speed."""
        return cls(Angle.from_degrees(azimuth_degrees), speed)

    @classmethod
    def from_course(cls, course_degrees: float, meters_per_second: float) -> "GroundVelocity | None":
        """Create from a course and speed reported by a positioning fix.

        Positioning APIs report a negative course when no valid course is
        available (e.g. when stationary).

        Args:
            course_degrees: Course over ground in degrees, negative if invalid.
            meters_per_second: Speed over ground.

        Returns:
            GroundVelocity, or None when the course is invalid.
        """
        if course_degrees < 0:
            logger.debug("Course unavailable (%.1f), no ground velocity", course_degrees)
            return None
        return cls.from_values(course_degrees, meters_per_second)

    @classmethod
    def from_location(cls, fix: PositionFix) -> "GroundVelocity | None":
        """Create from a positioning fix; None when its course is invalid."""
        return cls.from_course(fix.course, fix.speed)

    @classmethod
    def from_vector(cls, velocity: Vector3) -> "GroundVelocity":
        """Create from a velocity vector in meters per second.

        The vertical component is ignored.
        """
        return cls.from_values(velocity.bearing(), velocity.horizontal_magnitude())

    def to_vector(self) -> Vector3:
        """Return the velocity as east/up/north components in meters per second."""
        return Vector3.from_bearing(self.azimuth.degrees, self.speed.meters_per_second)

    def __str__(self) -> str:
        # + 0.0 turns -0.0 into 0.0
        degrees = self.azimuth.degrees + 0.0
        knots = self.speed.knots + 0.0
        return f"{degrees:03.0f}° at {knots:.0f} kn"
