import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from health_tracker import db
from health_tracker.domain.errors import StorageError
from health_tracker.models.health_entry_record import HealthEntryRecord

logger = logging.getLogger(__name__)


class HealthEntryRepository:
    """Stores and loads canonical (kg / cm) health entry rows."""

    def insert(self, entry_date: date, weight_kg: float, waist_cm: float) -> int:
        try:
            record = HealthEntryRecord(date=entry_date, weight=weight_kg, waist=waist_cm)
            db.session.add(record)
            db.session.commit()
            return record.id
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Failed to insert health entry for %s", entry_date)
            raise StorageError(f"Failed to save health entry: {str(e)}") from e

    def query_by_date_range(self, start_date: Optional[date] = None,
                            end_date: Optional[date] = None) -> List[HealthEntryRecord]:
        """Rows with start_date <= date <= end_date. Either bound may be None. No ordering."""
        try:
            query = HealthEntryRecord.query
            if start_date:
                query = query.filter(HealthEntryRecord.date >= start_date)
            if end_date:
                query = query.filter(HealthEntryRecord.date <= end_date)
            return query.all()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Failed to query health entries")
            raise StorageError(f"Failed to load health entries: {str(e)}") from e

    def delete_by_date(self, entry_date: date) -> int:
        try:
            deleted = HealthEntryRecord.query.filter_by(date=entry_date).delete()
            db.session.commit()
            return deleted
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Failed to delete health entries for %s", entry_date)
            raise StorageError(f"Failed to delete health entries: {str(e)}") from e
