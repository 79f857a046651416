from datetime import date

import pytest

from health_tracker.models.health_entry_record import HealthEntryRecord
from health_tracker.services.chart_service import ChartService

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


@pytest.fixture
def records():
    return [
        HealthEntryRecord(id=1, date=date(2024, 1, 10), weight=80.0, waist=90.0),
        HealthEntryRecord(id=2, date=date(2024, 1, 17), weight=79.2, waist=89.1),
        HealthEntryRecord(id=3, date=date(2024, 1, 24), weight=78.6, waist=88.4),
    ]


@pytest.mark.parametrize('measurement_filter', ['weight', 'waist', 'all'])
def test_generates_png(records, measurement_filter):
    image = ChartService.generate_progress_chart(records, measurement_filter)
    assert image.startswith(PNG_SIGNATURE)


def test_empty_series_renders_placeholder():
    assert ChartService.generate_progress_chart([]).startswith(PNG_SIGNATURE)


def test_single_point(records):
    assert ChartService.generate_progress_chart(records[:1]).startswith(PNG_SIGNATURE)


def test_unknown_filter_raises(records):
    with pytest.raises(ValueError, match="Invalid measurement_filter"):
        ChartService.generate_progress_chart(records, 'bmi')
