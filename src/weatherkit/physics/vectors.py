"""Vector utilities for velocity components.

Axis convention:
    x: east
    y: up
    z: north

Typical usage example:
    from weatherkit.physics.vectors import Vector3

    wind = Vector3.from_bearing(270.0, 10.0)  # 10 m/s toward the west
    print(wind.bearing(), wind.horizontal_magnitude())
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """Immutable 3D vector.

    Attributes:
        x: East component.
        y: Up component.
        z: North component.

    Examples:
        >>> Vector3(3.0, 0.0, 4.0).horizontal_magnitude()
        5.0
    """

    x: float
    y: float
    z: float

    def horizontal_magnitude(self) -> float:
        """Length of the east/north projection, ignoring the vertical component."""
        return math.hypot(self.x, self.z)

    def bearing(self) -> float:
        """Direction of the horizontal projection in degrees clockwise from north.

        Returns:
            Bearing in [0, 360). 0.0 for a vector with no horizontal component.
        """
        return math.degrees(math.atan2(self.x, self.z)) % 360.0

    @classmethod
    def from_bearing(cls, bearing_degrees: float, magnitude: float) -> "Vector3":
        """Create a horizontal vector from a bearing and a length.

        Args:
            bearing_degrees: Direction in degrees clockwise from north.
            magnitude: Vector length.

        Returns:
            Vector with ``y == 0``.
        """
        theta = math.radians(bearing_degrees)
        return cls(magnitude * math.sin(theta), 0.0, magnitude * math.cos(theta))

    def __str__(self) -> str:
        return f"Vector3(x={self.x:.2f}, y={self.y:.2f}, z={self.z:.2f})"
