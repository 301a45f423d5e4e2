"""
Request validation for flight endpoints.

Each validator returns a list of error messages, empty when the input
is acceptable. Routes answer 400 with these messages.
"""

from typing import Any, List, Mapping

from flighttrack.models.flight import parse_timestamp

CREATE_FLIGHT_STRING_FIELDS = ('arrivalAerodrome', 'departureAerodrome')
CREATE_FLIGHT_DATE_FIELDS = ('arrivalTime', 'departureTime')

AIRSPACE_PARAMS = ('bottomLeftX', 'bottomLeftY', 'topRightX', 'topRightY')


def _is_blank(value: Any) -> bool:
    return value is None or value == ''


def validate_create_flight(body: Any) -> List[str]:
    """Check a create-flight body: two aerodrome codes and two ISO dates."""
    if not isinstance(body, dict):
        return ['Request body must be a JSON object']

    errors = []
    for field in CREATE_FLIGHT_STRING_FIELDS:
        value = body.get(field)
        if not isinstance(value, str) and value is not None:
            errors.append(f'{field} must be a string')
        elif _is_blank(value):
            errors.append(f'{field} should not be empty')

    for field in CREATE_FLIGHT_DATE_FIELDS:
        value = body.get(field)
        if _is_blank(value):
            errors.append(f'{field} should not be empty')
        elif parse_timestamp(value) is None:
            errors.append(f'{field} must be a valid ISO 8601 date string')

    return errors


def validate_position_query(args: Mapping[str, str]) -> List[str]:
    """Check the optional 'time' query parameter."""
    value = args.get('time')
    if value is None or value == '':
        return []
    if parse_timestamp(value) is None:
        return ['time must be a valid ISO 8601 date string']
    return []
