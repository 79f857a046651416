from enum import Enum
from typing import Union

from health_tracker.domain.errors import ValidationError


class WeightUnit(Enum):
    """Units accepted for body weight."""
    KILOGRAM = "kg"
    POUND = "lbs"
    STONE = "st"


class WaistUnit(Enum):
    """Units accepted for waist circumference."""
    CENTIMETER = "cm"
    INCH = "inches"


# Units every value is persisted in
CANONICAL_WEIGHT_UNIT = WeightUnit.KILOGRAM
CANONICAL_WAIST_UNIT = WaistUnit.CENTIMETER


def _valid_tags(unit_enum) -> str:
    return ', '.join(unit.value for unit in unit_enum)


def parse_weight_unit(unit: Union[str, WeightUnit]) -> WeightUnit:
    if isinstance(unit, WeightUnit):
        return unit
    try:
        return WeightUnit(unit)
    except ValueError:
        raise ValidationError(
            f"Invalid weight unit: {unit}. Must be one of: {_valid_tags(WeightUnit)}"
        )


def parse_waist_unit(unit: Union[str, WaistUnit]) -> WaistUnit:
    if isinstance(unit, WaistUnit):
        return unit
    try:
        return WaistUnit(unit)
    except ValueError:
        raise ValidationError(
            f"Invalid waist unit: {unit}. Must be one of: {_valid_tags(WaistUnit)}"
        )
