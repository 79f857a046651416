"""
Unit conversion utilities for health tracking.
All data is stored in metric (kg, cm) in the database.
Conversions are applied on input/output based on the requested unit.

Every conversion pivots through the canonical unit of its dimension, so each
unit only needs a factor to and from kg (weight) or cm (waist).
"""
import math
from typing import Union

from health_tracker.domain.units import WeightUnit, WaistUnit

LBS_TO_KG = 1 / 2.20462262185
ST_TO_KG = 6.35029318
INCHES_TO_CM = 2.54

# kg per unit
_WEIGHT_FACTORS = {
    WeightUnit.KILOGRAM: 1.0,
    WeightUnit.POUND: LBS_TO_KG,
    WeightUnit.STONE: ST_TO_KG,
}

# cm per unit
_WAIST_FACTORS = {
    WaistUnit.CENTIMETER: 1.0,
    WaistUnit.INCH: INCHES_TO_CM,
}


def round_measurement(value: float) -> float:
    """Round half-up to 4 decimal places."""
    return math.floor(value * 10000 + 0.5) / 10000


def convert_weight(value: float, from_unit: Union[str, WeightUnit],
                   to_unit: Union[str, WeightUnit]) -> float:
    # Raises ValueError for tags outside the WeightUnit enumeration
    from_unit = WeightUnit(from_unit)
    to_unit = WeightUnit(to_unit)
    if from_unit == to_unit:
        return value

    kg_value = value * _WEIGHT_FACTORS[from_unit]
    return round_measurement(kg_value / _WEIGHT_FACTORS[to_unit])


def convert_waist(value: float, from_unit: Union[str, WaistUnit],
                  to_unit: Union[str, WaistUnit]) -> float:
    from_unit = WaistUnit(from_unit)
    to_unit = WaistUnit(to_unit)
    if from_unit == to_unit:
        return value

    cm_value = value * _WAIST_FACTORS[from_unit]
    return round_measurement(cm_value / _WAIST_FACTORS[to_unit])


def convert_weight_to_standard(value: float, unit: Union[str, WeightUnit]) -> float:
    return convert_weight(value, unit, WeightUnit.KILOGRAM)


def convert_waist_to_standard(value: float, unit: Union[str, WaistUnit]) -> float:
    return convert_waist(value, unit, WaistUnit.CENTIMETER)
