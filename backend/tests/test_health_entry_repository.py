from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from health_tracker import db
from health_tracker.domain.errors import StorageError
from health_tracker.repositories.health_entry_repository import HealthEntryRepository


@pytest.fixture
def repo(app_context):
    return HealthEntryRepository()


def test_insert_returns_generated_ids(repo):
    first = repo.insert(date(2024, 1, 15), 75.5, 85.0)
    second = repo.insert(date(2024, 1, 15), 75.0, 84.0)
    assert first > 0
    assert second > first


def test_inserted_row_is_canonical_and_timestamped(repo):
    entry_id = repo.insert(date(2024, 1, 15), 74.8427, 86.36)
    record, = repo.query_by_date_range()
    assert record.id == entry_id
    assert record.date == date(2024, 1, 15)
    assert record.weight == 74.8427
    assert record.waist == 86.36
    assert record.created_at is not None


def test_query_bounds_are_inclusive_and_optional(repo):
    for day in (1, 10, 20, 31):
        repo.insert(date(2024, 1, day), 80, 90)

    def days(records):
        return sorted(r.date.day for r in records)

    assert days(repo.query_by_date_range()) == [1, 10, 20, 31]
    assert days(repo.query_by_date_range(date(2024, 1, 10), date(2024, 1, 20))) == [10, 20]
    assert days(repo.query_by_date_range(start_date=date(2024, 1, 20))) == [20, 31]
    assert days(repo.query_by_date_range(end_date=date(2024, 1, 10))) == [1, 10]


def test_delete_by_date(repo):
    repo.insert(date(2024, 1, 15), 80, 90)
    repo.insert(date(2024, 1, 15), 81, 91)
    repo.insert(date(2024, 1, 16), 82, 92)

    assert repo.delete_by_date(date(2024, 1, 15)) == 2
    assert repo.delete_by_date(date(2024, 1, 15)) == 0
    assert [r.date for r in repo.query_by_date_range()] == [date(2024, 1, 16)]


def test_insert_failure_becomes_storage_error(repo, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db.session, 'commit', broken_commit)

    with pytest.raises(StorageError):
        repo.insert(date(2024, 1, 15), 80, 90)
