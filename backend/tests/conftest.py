from datetime import date

import pytest

from health_tracker import create_app, db
from health_tracker.models.health_entry_record import HealthEntryRecord


@pytest.fixture
def app():
    """Flask app on a fresh in-memory SQLite database."""
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_context(app):
    with app.app_context():
        yield


class InMemoryRepository:
    """Stand-in storage collaborator that records every call."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.inserted = []
        self.queries = []
        self.deleted_dates = []

    def insert(self, entry_date, weight_kg, waist_cm):
        entry_id = len(self.records) + 1
        self.inserted.append((entry_date, weight_kg, waist_cm))
        self.records.append(HealthEntryRecord(id=entry_id, date=entry_date, weight=weight_kg, waist=waist_cm))
        return entry_id

    def query_by_date_range(self, start_date=None, end_date=None):
        self.queries.append((start_date, end_date))
        return [
            r for r in self.records
            if (start_date is None or r.date >= start_date) and (end_date is None or r.date <= end_date)
        ]

    def delete_by_date(self, entry_date):
        self.deleted_dates.append(entry_date)
        before = len(self.records)
        self.records = [r for r in self.records if r.date != entry_date]
        return before - len(self.records)


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def today_iso():
    return date.today().isoformat()
