"""
Flight API endpoints.

Provides endpoints for:
- GET /flights - List all flight records
- GET /flights/airports - List all airports
- GET /flights/<id>/details - Get a single flight
- POST /flights - Create a flight record
- GET /flights/<id>/position - Where the flight is at ?time= (default now)
- GET /flights/<id>/in-airspace - Whether that position is inside a box
"""

import logging
import math
from datetime import datetime
from typing import Optional

from flask import Blueprint, current_app, jsonify, request

from flighttrack.api.validation import (
    AIRSPACE_PARAMS,
    validate_create_flight,
    validate_position_query,
)
from flighttrack.errors import FlightTrackError
from flighttrack.models.flight import parse_timestamp
from flighttrack.services import FlightService

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/flights')


def _service() -> FlightService:
    return current_app.config['FLIGHT_SERVICE']


def _validation_failed(errors):
    return jsonify({'message': 'Validation failed', 'errors': errors}), 400


def _query_time() -> Optional[datetime]:
    return parse_timestamp(request.args.get('time'))


@flights_bp.route('', methods=['GET'])
def list_flights():
    """List all flight records from the data store."""
    try:
        flights = _service().get_flights()
    except FlightTrackError as e:
        logger.error(f'Failed to fetch flights: {e}')
        return jsonify({'message': str(e) or 'Failed to fetch flights'}), 500

    return jsonify({'message': 'Successfully fetched all flights', 'data': flights})


@flights_bp.route('/airports', methods=['GET'])
def list_airports():
    """List all airport records from the data store."""
    try:
        airports = _service().get_airports()
    except FlightTrackError as e:
        logger.error(f'Failed to fetch airports: {e}')
        return jsonify({'message': str(e) or 'Failed to fetch airports'}), 500

    return jsonify({'message': 'Successfully fetched airports', 'data': airports})


@flights_bp.route('/<flight_id>/details', methods=['GET'])
def get_flight(flight_id: str):
    """Get the departure/arrival details of a single flight."""
    try:
        flight = _service().get_flight(flight_id)
    except FlightTrackError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'message': 'Successfully fetched flight data', 'data': flight.to_dict()})


@flights_bp.route('', methods=['POST'])
def create_flight():
    """
    Create a flight record.

    Body (JSON):
    - departureAerodrome, arrivalAerodrome: aerodrome codes
    - departureTime, arrivalTime: ISO 8601 date strings
    """
    body = request.get_json(silent=True)
    errors = validate_create_flight(body)
    if errors:
        return _validation_failed(errors)

    try:
        created = _service().create_flight(body)
    except FlightTrackError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'message': 'Successfully created flight', 'data': created}), 201


@flights_bp.route('/<flight_id>/position', methods=['GET'])
def get_flight_position(flight_id: str):
    """
    Get the interpolated position of a flight.

    Query parameters:
    - time: ISO 8601 timestamp (default now)
    """
    errors = validate_position_query(request.args)
    if errors:
        return _validation_failed(errors)

    try:
        position = _service().get_flight_position(flight_id, _query_time())
    except FlightTrackError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'message': 'Flight position fetched successfully', 'data': position.to_dict()})


@flights_bp.route('/<flight_id>/in-airspace', methods=['GET'])
def get_flight_in_airspace(flight_id: str):
    """
    Check whether a flight is inside a rectangular airspace.

    Query parameters:
    - bottomLeftX, bottomLeftY: bottom-left corner (longitude, latitude)
    - topRightX, topRightY: top-right corner (longitude, latitude)
    - time: ISO 8601 timestamp (default now)

    Antimeridian boxes need topRightX - bottomLeftX in (180, 360].
    """
    errors = validate_position_query(request.args)
    if errors:
        return _validation_failed(errors)

    raw = [request.args.get(name) for name in AIRSPACE_PARAMS]
    if any(value is None or value == '' for value in raw):
        return jsonify({'error': 'Airspace coordinates are required'}), 400

    try:
        bottom_left_x, bottom_left_y, top_right_x, top_right_y = (float(value) for value in raw)
    except ValueError:
        return jsonify({'error': 'Airspace coordinates must be numeric'}), 400

    if not all(math.isfinite(value) for value in (bottom_left_x, bottom_left_y, top_right_x, top_right_y)):
        return jsonify({'error': 'Airspace coordinates must be finite'}), 400

    try:
        is_in_airspace = _service().is_flight_in_airspace(
            flight_id,
            bottom_left_x,
            bottom_left_y,
            top_right_x,
            top_right_y,
            _query_time(),
        )
    except FlightTrackError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({
        'message': 'Airspace information fetched successfully',
        'data': {'isInAirspace': is_in_airspace},
    })
