"""
Weight and waist measurement value objects.

Each measurement validates itself on construction against the acceptable
range of its unit. The ranges are chosen per unit as round numbers, so they
are not exact conversions of one another.
"""
import math
from typing import Dict, Tuple, Union

from health_tracker.domain.errors import ValidationError
from health_tracker.domain.units import WeightUnit, WaistUnit, parse_weight_unit, parse_waist_unit

# Inclusive (min, max) per unit
WEIGHT_RANGES: Dict[WeightUnit, Tuple[int, int]] = {
    WeightUnit.KILOGRAM: (20, 500),
    WeightUnit.POUND: (44, 1100),
    WeightUnit.STONE: (3, 79),
}

WAIST_RANGES: Dict[WaistUnit, Tuple[int, int]] = {
    WaistUnit.CENTIMETER: (40, 200),
    WaistUnit.INCH: (16, 79),
}


def _validate_value(value, unit_tag: str, bounds: Tuple[int, int], dimension: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{dimension} must be a positive number")
    if isinstance(value, bool) or math.isnan(number) or number <= 0:
        raise ValidationError(f"{dimension} must be a positive number")

    min_val, max_val = bounds
    if number < min_val or number > max_val:
        raise ValidationError(f"{dimension} must be between {min_val} and {max_val} {unit_tag}")
    return number


class _Measurement:
    """Shared read-only behavior of the two measurement types."""

    __slots__ = ('_value', '_unit')

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self):
        return self._unit

    def __setattr__(self, name, value):
        if hasattr(self, '_unit'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value and self._unit == other._unit

    def __hash__(self):
        return hash((type(self).__name__, self._value, self._unit))

    def __str__(self):
        return f"{self._value} {self._unit.value}"

    def __repr__(self):
        return f"<{type(self).__name__} {self}>"


class WeightMeasurement(_Measurement):
    __slots__ = ()

    def __init__(self, value: float, unit: Union[str, WeightUnit]):
        unit = parse_weight_unit(unit)
        self._value = _validate_value(value, unit.value, WEIGHT_RANGES[unit], 'Weight')
        self._unit = unit

    @classmethod
    def restore(cls, value: float, unit: Union[str, WeightUnit]) -> 'WeightMeasurement':
        """
        Rebuild a measurement from a stored canonical value projected into a
        display unit. The range check is skipped: the value was validated when
        it was entered, and rounding the projection may cross the round-number
        bounds of another unit (500 kg is 1102.3 lbs).
        """
        measurement = cls.__new__(cls)
        object.__setattr__(measurement, '_value', float(value))
        object.__setattr__(measurement, '_unit', parse_weight_unit(unit))
        return measurement


class WaistMeasurement(_Measurement):
    __slots__ = ()

    def __init__(self, value: float, unit: Union[str, WaistUnit]):
        unit = parse_waist_unit(unit)
        self._value = _validate_value(value, unit.value, WAIST_RANGES[unit], 'Waist size')
        self._unit = unit

    @classmethod
    def restore(cls, value: float, unit: Union[str, WaistUnit]) -> 'WaistMeasurement':
        """Rebuild a stored waist measurement without the range check."""
        measurement = cls.__new__(cls)
        object.__setattr__(measurement, '_value', float(value))
        object.__setattr__(measurement, '_unit', parse_waist_unit(unit))
        return measurement
