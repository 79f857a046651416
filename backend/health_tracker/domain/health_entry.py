import re
from datetime import date, datetime
from typing import Any, Dict, Optional

from health_tracker.domain.errors import ValidationError
from health_tracker.domain.measurements import WeightMeasurement, WaistMeasurement

DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')


def parse_entry_date(value: str) -> date:
    """Parse a YYYY-MM-DD string, raising ValidationError when it is malformed."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValidationError("Date must be in YYYY-MM-DD format")
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        # Right shape but not a calendar date, e.g. 2024-02-30
        raise ValidationError("Date must be in YYYY-MM-DD format")


class HealthEntry:
    """
    A dated pair of weight and waist measurements.

    Entries are never modified after construction. Use create() for a new
    entry and reconstitute() for one loaded from storage.
    """

    def __init__(self, entry_id: Optional[int], entry_date: str,
                 weight: WeightMeasurement, waist: WaistMeasurement,
                 created_at: Optional[datetime] = None):
        if not isinstance(weight, WeightMeasurement):
            raise TypeError(f"weight must be a WeightMeasurement, got {type(weight).__name__}")
        if not isinstance(waist, WaistMeasurement):
            raise TypeError(f"waist must be a WaistMeasurement, got {type(waist).__name__}")

        self._id = entry_id
        self._date = entry_date
        self._weight = weight
        self._waist = waist
        self._created_at = created_at

    @classmethod
    def create(cls, entry_date: str, weight: WeightMeasurement,
               waist: WaistMeasurement) -> 'HealthEntry':
        parsed = parse_entry_date(entry_date)
        if parsed > date.today():
            raise ValidationError("Entry date cannot be in the future")
        return cls(None, entry_date, weight, waist)

    @classmethod
    def reconstitute(cls, entry_id: int, entry_date: str, weight: WeightMeasurement,
                     waist: WaistMeasurement, created_at: Optional[datetime] = None) -> 'HealthEntry':
        return cls(entry_id, entry_date, weight, waist, created_at)

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def date(self) -> str:
        return self._date

    @property
    def weight(self) -> WeightMeasurement:
        return self._weight

    @property
    def waist(self) -> WaistMeasurement:
        return self._waist

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self._id,
            'date': self._date,
            'weight': self._weight.value,
            'weight_unit': self._weight.unit.value,
            'waist_size': self._waist.value,
            'waist_unit': self._waist.unit.value,
            'created_at': self._created_at.isoformat() if self._created_at else None
        }

    def __repr__(self):
        return f'<HealthEntry {self._id} - {self._date} - {self._weight} / {self._waist}>'
