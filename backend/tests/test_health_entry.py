from datetime import date, datetime, timedelta

import pytest

from health_tracker.domain.errors import ValidationError
from health_tracker.domain.health_entry import HealthEntry, parse_entry_date
from health_tracker.domain.measurements import WeightMeasurement, WaistMeasurement


@pytest.fixture
def weight():
    return WeightMeasurement(75.5, 'kg')


@pytest.fixture
def waist():
    return WaistMeasurement(85.0, 'cm')


def test_create_today_succeeds(weight, waist, today_iso):
    entry = HealthEntry.create(today_iso, weight, waist)
    assert entry.id is None
    assert entry.date == today_iso
    assert entry.weight == weight
    assert entry.waist == waist
    assert entry.created_at is None


def test_create_accepts_old_dates(weight, waist):
    assert HealthEntry.create('1970-01-01', weight, waist).date == '1970-01-01'


def test_create_rejects_future_date(weight, waist):
    with pytest.raises(ValidationError, match="Entry date cannot be in the future"):
        HealthEntry.create('2099-01-01', weight, waist)


def test_create_rejects_tomorrow(weight, waist):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    with pytest.raises(ValidationError, match="Entry date cannot be in the future"):
        HealthEntry.create(tomorrow, weight, waist)


@pytest.mark.parametrize('bad_date', [
    '15-01-2024',
    '2024/01/15',
    '2024-1-15',
    '2024-01-15T00:00:00',
    '2024-01-15\n',
    '',
    '2024-02-30',
    '2024-13-01',
])
def test_create_rejects_malformed_date(weight, waist, bad_date):
    with pytest.raises(ValidationError, match="Date must be in YYYY-MM-DD format"):
        HealthEntry.create(bad_date, weight, waist)


def test_measurements_are_not_interchangeable(weight, waist, today_iso):
    with pytest.raises(TypeError):
        HealthEntry.create(today_iso, waist, weight)


def test_reconstitute_keeps_id_and_timestamp(weight, waist):
    created_at = datetime(2024, 1, 15, 8, 30)
    entry = HealthEntry.reconstitute(7, '2024-01-15', weight, waist, created_at)
    assert entry.id == 7
    assert entry.created_at == created_at


def test_to_dict(weight, waist):
    entry = HealthEntry.reconstitute(3, '2024-01-15', weight, waist, datetime(2024, 1, 15, 9, 0))
    assert entry.to_dict() == {
        'id': 3,
        'date': '2024-01-15',
        'weight': 75.5,
        'weight_unit': 'kg',
        'waist_size': 85.0,
        'waist_unit': 'cm',
        'created_at': '2024-01-15T09:00:00'
    }


def test_parse_entry_date():
    assert parse_entry_date('2024-01-15') == date(2024, 1, 15)
    with pytest.raises(ValidationError):
        parse_entry_date(None)
