"""Tests for unit enumerations and raw conversions."""

import itertools

import pytest

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

UNIT_TYPES = [UnitPressure, UnitTemperature, UnitSpeed, UnitAngle, UnitLength]
ALL_UNITS = [unit for unit_type in UNIT_TYPES for unit in unit_type]
UNIT_PAIRS = [
    pair for unit_type in UNIT_TYPES for pair in itertools.product(list(unit_type), repeat=2)
]


class TestUnitDefinitions:
    """Test unit members and their attributes."""

    def test_units_are_dimensions(self) -> None:
        """Test every unit enumeration derives from Dimension."""
        for unit_type in UNIT_TYPES:
            assert issubclass(unit_type, Dimension)

    def test_symbols(self) -> None:
        """Test display symbols."""
        assert UnitPressure.HECTOPASCALS.symbol == "hPa"
        assert UnitPressure.INCHES_OF_MERCURY.symbol == "inHg"
        assert UnitSpeed.KNOTS.symbol == "kn"
        assert UnitLength.FEET.symbol == "ft"
        assert str(UnitTemperature.CELSIUS) == "°C"

    def test_canonical_base_units(self) -> None:
        """Test the canonical unit of each dimension maps onto itself."""
        for unit in (
            UnitPressure.PASCALS,
            UnitTemperature.KELVIN,
            UnitSpeed.METERS_PER_SECOND,
            UnitAngle.DEGREES,
            UnitLength.METERS,
        ):
            assert unit.coefficient == 1.0
            assert unit.constant == 0.0

    def test_from_name(self) -> None:
        """Test lookup by member name ignores case and surrounding spaces."""
        assert UnitPressure.from_name("inches_of_mercury") is UnitPressure.INCHES_OF_MERCURY
        assert UnitSpeed.from_name(" Knots ") is UnitSpeed.KNOTS

    def test_from_name_unknown(self) -> None:
        """Test lookup of an unknown name raises KeyError."""
        with pytest.raises(KeyError):
            UnitTemperature.from_name("rankine")


class TestConvert:
    """Test convert()."""

    @pytest.mark.parametrize("unit", ALL_UNITS, ids=lambda u: u.name)
    def test_identity_is_exact(self, unit: Dimension) -> None:
        """Test converting to the same unit returns the value unchanged."""
        value = 123.456789
        assert convert(value, unit, unit) == value

    @pytest.mark.parametrize("source,target", UNIT_PAIRS, ids=lambda u: u.name)
    def test_round_trip(self, source: Dimension, target: Dimension) -> None:
        """Test converting there and back recovers the value."""
        value = -42.125
        there = convert(value, source, target)
        assert convert(there, target, source) == pytest.approx(value, rel=1e-9)

    def test_celsius_to_kelvin(self) -> None:
        """Test the celsius offset."""
        assert convert(0.0, UnitTemperature.CELSIUS, UnitTemperature.KELVIN) == 273.15

    def test_celsius_to_fahrenheit(self) -> None:
        """Test boiling point of water."""
        assert convert(100.0, UnitTemperature.CELSIUS, UnitTemperature.FAHRENHEIT) == pytest.approx(
            212.0
        )

    def test_fahrenheit_to_kelvin(self) -> None:
        """Test absolute zero in Fahrenheit."""
        assert convert(-459.67, UnitTemperature.FAHRENHEIT, UnitTemperature.KELVIN) == pytest.approx(
            0.0, abs=1e-9
        )

    def test_knots_to_meters_per_second(self) -> None:
        """Test one knot is one nautical mile per hour."""
        assert convert(1.0, UnitSpeed.KNOTS, UnitSpeed.METERS_PER_SECOND) == pytest.approx(
            0.514444, abs=1e-5
        )

    def test_feet_to_meters(self) -> None:
        """Test the international foot."""
        assert convert(1000.0, UnitLength.FEET, UnitLength.METERS) == pytest.approx(304.8)

    def test_mismatched_dimensions(self) -> None:
        """Test converting across dimensions raises UnitMismatchError."""
        with pytest.raises(UnitMismatchError):
            convert(1.0, UnitSpeed.KNOTS, UnitLength.FEET)

    def test_mismatch_is_type_error(self) -> None:
        """Test UnitMismatchError can be caught as TypeError."""
        with pytest.raises(TypeError):
            convert(1.0, UnitPressure.HECTOPASCALS, UnitTemperature.KELVIN)
