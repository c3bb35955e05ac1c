"""Preferred display units per dimension.

Lets an application pick, per dimension, the unit measurements are shown in
(e.g. inches of mercury and Fahrenheit in the US, hectopascals and Celsius
elsewhere), typically from the ``units`` section of its settings file:

    units:
      pressure: inches_of_mercury
      temperature: fahrenheit
      speed: knots

Typical usage example:
    from weatherkit.core.config import ConfigLoader
    from weatherkit.measurement.display import DisplayUnits

    display = DisplayUnits.from_config(ConfigLoader.load("config/settings.yaml"))
    print(display.format(Pressure.from_hectopascals(1013.25), precision=2))  # "29.92 inHg"
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from weatherkit.core.config import ConfigError, ConfigLoader
from weatherkit.measurement.measurement import Measurement
from weatherkit.measurement.units import (
    Dimension,
    UnitAngle,
    UnitLength,
    UnitMismatchError,
    UnitPressure,
    UnitSpeed,
    UnitTemperature,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayUnits:
    """Preferred unit for each dimension.

    Defaults follow common aviation usage.

    Attributes:
        pressure: Preferred pressure unit.
        temperature: Preferred temperature unit.
        speed: Preferred speed unit.
        angle: Preferred angle unit.
        length: Preferred length unit.
        precision: Decimal places used by ``format``.
    """

    pressure: UnitPressure = UnitPressure.HECTOPASCALS
    temperature: UnitTemperature = UnitTemperature.CELSIUS
    speed: UnitSpeed = UnitSpeed.KNOTS
    angle: UnitAngle = UnitAngle.DEGREES
    length: UnitLength = UnitLength.FEET
    precision: int = 1

    @classmethod
    def from_config(cls, config: ConfigLoader, section: str = "units") -> "DisplayUnits":
        """Build display units from a configuration section.

        Missing keys keep their defaults.

        Args:
            config: Loaded configuration.
            section: Dot-notation key of the section holding unit names.

        Returns:
            DisplayUnits instance.

        Raises:
            ConfigError: If the section is not a mapping or a unit name is not
                known for its dimension.
        """
        if config.get(section) is None:
            logger.debug("No %s section, using default display units", section)
            return cls()
        values = config.get_section(section)

        overrides: dict[str, Any] = {}
        for field in fields(cls):
            if field.name not in values:
                continue
            raw = values[field.name]
            if field.name == "precision":
                try:
                    overrides["precision"] = int(raw)
                except (TypeError, ValueError) as e:
                    raise ConfigError(f"Invalid precision in {section}: {raw!r}") from e
                continue
            unit_type: type[Dimension] = type(getattr(cls, field.name))
            try:
                overrides[field.name] = unit_type.from_name(str(raw))
            except KeyError as e:
                raise ConfigError(f"Unknown {field.name} unit in {section}: {raw!r}") from e

        display = replace(cls(), **overrides)
        logger.debug("Display units: %s", display)
        return display

    def unit_for(self, unit_type: type[Dimension]) -> Dimension:
        """Return the preferred unit for a unit enumeration.

        Raises:
            UnitMismatchError: If no preference exists for ``unit_type``.
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, unit_type):
                return value
        raise UnitMismatchError(f"No display unit for {unit_type.__name__}")

    def express(self, measurement: Measurement[Any]) -> Measurement[Any]:
        """Return ``measurement`` converted to the preferred unit of its dimension."""
        return measurement.converted(self.unit_for(type(measurement.unit)))

    def format(self, measurement: Measurement[Any], precision: int | None = None) -> str:
        """Format a measurement in its preferred unit, e.g. ``"29.92 inHg"``.

        Args:
            measurement: Measurement to format.
            precision: Decimal places; defaults to ``self.precision``.
        """
        shown = self.express(measurement)
        places = self.precision if precision is None else precision
        return f"{shown.value:.{places}f} {shown.unit.symbol}"
