import calendar
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from flask import Blueprint, Response, current_app, jsonify, request
from marshmallow import ValidationError

from health_tracker.domain.errors import DomainError, StorageError
from health_tracker.schemas.health_entry_schemas import HealthEntrySchema
from health_tracker.services.chart_service import ChartService, MEASUREMENT_FILTERS
from health_tracker.services.health_entry_service import HealthEntryService

entries_bp = Blueprint('entries', __name__)

# Months covered by each time_range, counted back from today
TIME_RANGE_MONTHS = {
    'month': 1,
    '3_months': 3,
    '6_months': 6,
    'all': None
}

# HELPER FUNCTIONS
def error_response(message: str, status_code: int = 400, details: Dict[str, Any] = None) -> Tuple[Dict, int]:
    response = {'error': message}
    if details:
        response['details'] = details
    return jsonify(response), status_code

def success_response(message: str, data: Dict[str, Any] = None, status_code: int = 200) -> Tuple[Dict, int]:
    response = {'message': message}
    if data:
        response['data'] = data
    return jsonify(response), status_code

def months_before(day: date, months: int) -> date:
    """Same day of month `months` earlier, clamped to the length of that month."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))

def parse_optional_dates() -> Tuple[Optional[date], Optional[date], Optional[Tuple[Dict, int]]]:
    """
    Parses optional start_date, end_date and time_range query parameters.
    Explicit dates take precedence over time_range.
    Returns: (start_date, end_date, None) on success, or (None, None, error_response) on validation failure
    """
    start_date_str = request.args.get('start_date')
    end_date_str = request.args.get('end_date')
    time_range = request.args.get('time_range', 'all')

    if time_range not in TIME_RANGE_MONTHS:
        return None, None, error_response(
            f"Invalid time_range. Valid: {', '.join(TIME_RANGE_MONTHS)}",
            400
        )

    start_date = None
    end_date = None

    months = TIME_RANGE_MONTHS[time_range]
    if months:
        end_date = date.today()
        start_date = months_before(end_date, months)

    if start_date_str:
        try:
            start_date = datetime.strptime(start_date_str, '%Y-%m-%d').date()
        except ValueError:
            return None, None, error_response("Invalid start_date format. Use YYYY-MM-DD", 400)

    if end_date_str:
        try:
            end_date = datetime.strptime(end_date_str, '%Y-%m-%d').date()
        except ValueError:
            return None, None, error_response("Invalid end_date format. Use YYYY-MM-DD", 400)

    if start_date and end_date and start_date > end_date:
        return None, None, error_response("start_date must be before or equal to end_date", 400)

    return start_date, end_date, None

def validate_pagination_params() -> Tuple[Optional[int], Optional[int], Optional[Tuple[Dict, int]]]:
    """
    Validates pagination query parameters.
    Returns: (page, per_page, None) on success, or (None, None, error_response) on validation failure
    """
    max_per_page = current_app.config['MAX_PER_PAGE']
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', current_app.config['HISTORY_PER_PAGE'], type=int)

    if page < 1:
        return None, None, error_response("page must be greater than 0", 400)
    if per_page < 1:
        return None, None, error_response("per_page must be greater than 0", 400)
    if per_page > max_per_page:
        return None, None, error_response(f"per_page cannot exceed {max_per_page}", 400)

    return page, per_page, None

def paginate_items(items: List[Any], page: int, per_page: int) -> Tuple[List[Any], Dict[str, Any]]:
    """
    Slices an already-ordered list into one page and builds pagination metadata.
    Out-of-range pages return an empty list.
    Returns: (page_items, pagination_info_dict)
    """
    total_count = len(items)
    total_pages = (total_count + per_page - 1) // per_page
    start = (page - 1) * per_page
    page_items = items[start:start + per_page]

    has_next = page < total_pages
    has_prev = page > 1 and total_pages > 0

    pagination_info = {
        'page': page,
        'per_page': per_page,
        'total_count': total_count,
        'total_pages': total_pages,
        'has_next': has_next,
        'has_prev': has_prev,
        'next_page': page + 1 if has_next else None,
        'prev_page': page - 1 if has_prev else None
    }

    return page_items, pagination_info

#ROUTES

# Save a new health entry
@entries_bp.route('/entries', methods=['POST'])
def save_entry():
    payload = request.get_json(silent=True)
    if payload is None:
        return error_response("Request body must be a JSON object", 400)

    try:
        validated_data = HealthEntrySchema().load(payload)

        entry_id = HealthEntryService().save(
            validated_data['date'],
            validated_data['weight'],
            validated_data['weight_unit'],
            validated_data['waist_size'],
            validated_data['waist_unit']
        )

        return success_response(
            "Entry saved successfully",
            {'id': entry_id},
            201
        )
    except ValidationError as e:
        return error_response("Validation failed", 400, e.messages)
    except DomainError as e:
        return error_response(str(e), 400)
    except StorageError:
        return error_response("Failed to save entry", 500)
    except Exception:
        current_app.logger.exception("Unexpected error while saving entry")
        return error_response("Failed to save entry", 500)


# History in display units, newest first (with pagination)
@entries_bp.route('/entries', methods=['GET'])
def get_entries():
    start_date, end_date, error = parse_optional_dates()
    if error:
        return error

    page, per_page, error = validate_pagination_params()
    if error:
        return error

    weight_unit = request.args.get('weight_unit', current_app.config['DEFAULT_WEIGHT_UNIT'])
    waist_unit = request.args.get('waist_unit', current_app.config['DEFAULT_WAIST_UNIT'])

    try:
        entries = HealthEntryService().list_by_date_range(
            start_date, end_date, weight_unit, waist_unit
        )
        page_entries, pagination_info = paginate_items(entries, page, per_page)

        return success_response(
            "Entries retrieved successfully",
            {
                'entries': [entry.to_dict() for entry in page_entries],
                'pagination': pagination_info
            }
        )
    except DomainError as e:
        return error_response(str(e), 400)
    except StorageError:
        return error_response("Failed to retrieve entries", 500)
    except Exception:
        current_app.logger.exception("Unexpected error while retrieving entries")
        return error_response("Failed to retrieve entries", 500)


# Delete every entry on a date (corrections are delete-and-reinsert)
@entries_bp.route('/entries/<entry_date>', methods=['DELETE'])
def delete_entries(entry_date: str):
    try:
        deleted_count = HealthEntryService().delete_by_date(entry_date)
        return success_response(
            "Entries deleted successfully",
            {'date': entry_date, 'deleted_count': deleted_count}
        )
    except DomainError as e:
        return error_response(str(e), 400)
    except StorageError:
        return error_response("Failed to delete entries", 500)
    except Exception:
        current_app.logger.exception("Unexpected error while deleting entries for %s", entry_date)
        return error_response("Failed to delete entries", 500)


# Chart points in canonical units, oldest first, one per date
@entries_bp.route('/chart-data', methods=['GET'])
def get_chart_data():
    start_date, end_date, error = parse_optional_dates()
    if error:
        return error

    try:
        records = HealthEntryService().list_for_charting(start_date, end_date)
        return success_response(
            "Chart data retrieved successfully",
            {
                'points': [record.to_dict() for record in records],
                'data_points': len(records),
                'weight_unit': 'kg',
                'waist_unit': 'cm'
            }
        )
    except StorageError:
        return error_response("Failed to retrieve chart data", 500)
    except Exception:
        current_app.logger.exception("Unexpected error while retrieving chart data")
        return error_response("Failed to retrieve chart data", 500)


@entries_bp.route('/chart', methods=['GET'])
def get_chart():
    """
    Get the progress chart as a PNG.

    measurement_filter: weight, waist or all (default)
    """
    start_date, end_date, error = parse_optional_dates()
    if error:
        return error

    measurement_filter = request.args.get('measurement_filter', 'all')
    if measurement_filter not in MEASUREMENT_FILTERS:
        return error_response(
            f"Invalid measurement_filter. Valid: {', '.join(MEASUREMENT_FILTERS)}",
            400
        )

    try:
        records = HealthEntryService().list_for_charting(start_date, end_date)

        # Generate chart (returns bytes - PNG image)
        image_data = ChartService.generate_progress_chart(records, measurement_filter)

        # Return image as response (not JSON!)
        return Response(
            image_data,
            mimetype='image/png',
            headers={
                'Content-Disposition': f'inline; filename=health_progress_{measurement_filter}.png',
                'X-Data-Points': str(len(records))
            }
        )
    except StorageError:
        return error_response("Failed to generate chart", 500)
    except Exception:
        current_app.logger.exception("Unexpected error while generating chart")
        return error_response("Failed to generate chart", 500)
