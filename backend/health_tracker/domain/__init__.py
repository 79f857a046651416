"""Domain model: units, measurements, health entries and their errors."""

from .errors import DomainError, ValidationError, StorageError
from .units import WeightUnit, WaistUnit, parse_weight_unit, parse_waist_unit
from .measurements import WeightMeasurement, WaistMeasurement, WEIGHT_RANGES, WAIST_RANGES
from .health_entry import HealthEntry, parse_entry_date

__all__ = [
    'DomainError',
    'ValidationError',
    'StorageError',
    'WeightUnit',
    'WaistUnit',
    'parse_weight_unit',
    'parse_waist_unit',
    'WeightMeasurement',
    'WaistMeasurement',
    'WEIGHT_RANGES',
    'WAIST_RANGES',
    'HealthEntry',
    'parse_entry_date'
]
