import logging
from datetime import date
from typing import List, Optional, Union

from health_tracker.domain.health_entry import HealthEntry, parse_entry_date
from health_tracker.domain.measurements import WeightMeasurement, WaistMeasurement
from health_tracker.domain.units import (
    WeightUnit,
    WaistUnit,
    CANONICAL_WEIGHT_UNIT,
    CANONICAL_WAIST_UNIT,
    parse_weight_unit,
    parse_waist_unit
)
from health_tracker.models.health_entry_record import HealthEntryRecord
from health_tracker.repositories.health_entry_repository import HealthEntryRepository
from health_tracker.utils.unit_conversion import (
    convert_weight,
    convert_waist,
    convert_weight_to_standard,
    convert_waist_to_standard
)

logger = logging.getLogger(__name__)

DateLike = Union[date, str, None]


def _coerce_date(value: DateLike) -> Optional[date]:
    if value is None or value == '':
        return None
    if isinstance(value, date):
        return value
    return parse_entry_date(value)


class HealthEntryService:
    """
    Entry point for saving and reading health entries.

    Entries are validated in the unit they were logged in, stored in kg / cm,
    and converted back to the caller's display units on read. The service
    keeps no state between calls.
    """

    def __init__(self, repository: HealthEntryRepository = None):
        self.repository = repository or HealthEntryRepository()

    def save(self, entry_date: str, weight_value: float, weight_unit: Union[str, WeightUnit],
             waist_value: float, waist_unit: Union[str, WaistUnit]) -> int:
        weight = WeightMeasurement(weight_value, weight_unit)
        waist = WaistMeasurement(waist_value, waist_unit)
        entry = HealthEntry.create(entry_date, weight, waist)

        weight_kg = convert_weight_to_standard(weight.value, weight.unit)
        waist_cm = convert_waist_to_standard(waist.value, waist.unit)

        entry_id = self.repository.insert(parse_entry_date(entry.date), weight_kg, waist_cm)
        logger.info("Saved health entry %s for %s (%s kg, %s cm)", entry_id, entry.date, weight_kg, waist_cm)
        return entry_id

    def list_by_date_range(self, start_date: DateLike = None, end_date: DateLike = None,
                           weight_unit: Union[str, WeightUnit] = CANONICAL_WEIGHT_UNIT,
                           waist_unit: Union[str, WaistUnit] = CANONICAL_WAIST_UNIT) -> List[HealthEntry]:
        """All entries in the inclusive range, newest first, in the requested display units."""
        weight_unit = parse_weight_unit(weight_unit)
        waist_unit = parse_waist_unit(waist_unit)

        records = self.repository.query_by_date_range(_coerce_date(start_date), _coerce_date(end_date))
        records = sorted(records, key=lambda r: (r.date, r.id), reverse=True)

        return [self._to_display_entry(record, weight_unit, waist_unit) for record in records]

    def list_for_charting(self, start_date: DateLike = None,
                          end_date: DateLike = None) -> List[HealthEntryRecord]:
        """
        Canonical records for plotting, oldest first.

        When several entries share a date only the most recently inserted one
        (highest id) is kept, so each date contributes a single point.
        """
        records = self.repository.query_by_date_range(_coerce_date(start_date), _coerce_date(end_date))

        latest_per_date = {}
        for record in sorted(records, key=lambda r: r.id):
            latest_per_date[record.date] = record

        return [latest_per_date[d] for d in sorted(latest_per_date)]

    def delete_by_date(self, entry_date: str) -> int:
        """Delete every entry on a date. Returns the number of entries removed."""
        deleted = self.repository.delete_by_date(parse_entry_date(entry_date))
        logger.info("Deleted %s health entries for %s", deleted, entry_date)
        return deleted

    @staticmethod
    def _to_display_entry(record: HealthEntryRecord, weight_unit: WeightUnit,
                          waist_unit: WaistUnit) -> HealthEntry:
        weight = WeightMeasurement.restore(
            convert_weight(record.weight, CANONICAL_WEIGHT_UNIT, weight_unit), weight_unit
        )
        waist = WaistMeasurement.restore(
            convert_waist(record.waist, CANONICAL_WAIST_UNIT, waist_unit), waist_unit
        )
        return HealthEntry.reconstitute(
            record.id,
            record.date.isoformat(),
            weight,
            waist,
            record.created_at
        )
