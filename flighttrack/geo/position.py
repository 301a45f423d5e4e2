"""
Flight position interpolation.

Motion model: constant speed along the single great-circle arc joining
the departure and arrival aerodromes. Positions are clamped to the
endpoints outside the [departure_time, arrival_time] window.

Location lookups and the clock are injected so the functions here stay
free of network and wall-clock dependencies.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from flighttrack.errors import UnknownLocation
from flighttrack.geo.geodesy import destination_point, haversine, initial_bearing
from flighttrack.models.airspace import Airspace, is_within_airspace
from flighttrack.models.coordinate import Coordinate
from flighttrack.models.flight import Flight, as_utc

# Resolves an aerodrome code to its coordinate. May return None or raise
# UnknownLocation when the code is not known.
LocationResolver = Callable[[str], Optional[Coordinate]]
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: current time in UTC."""
    return datetime.now(timezone.utc)


def _resolve(locate: LocationResolver, code: str) -> Coordinate:
    coordinate = locate(code)
    if coordinate is None:
        raise UnknownLocation(code)
    return coordinate


def compute_position(
    flight: Flight,
    locate: LocationResolver,
    query_time: Optional[datetime] = None,
    clock: Clock = utc_now,
) -> Coordinate:
    """
    Position of a flight at query_time (defaults to clock()).

    Returns the departure coordinate unchanged for any time at or before
    departure, and the arrival coordinate unchanged at or after arrival.

    Raises:
        UnknownLocation if either aerodrome cannot be resolved.
    """
    departure = _resolve(locate, flight.departure_aerodrome)
    arrival = _resolve(locate, flight.arrival_aerodrome)

    if query_time is None:
        query_time = clock()

    # Naive times are taken as UTC
    query_time = as_utc(query_time)
    departure_time = as_utc(flight.departure_time)
    arrival_time = as_utc(flight.arrival_time)

    if query_time <= departure_time:
        return departure
    if query_time >= arrival_time:
        return arrival

    total_seconds = (arrival_time - departure_time).total_seconds()
    elapsed_seconds = (query_time - departure_time).total_seconds()
    fraction = elapsed_seconds / total_seconds

    traveled_km = fraction * haversine(departure, arrival)
    bearing = initial_bearing(departure, arrival)

    return destination_point(departure, traveled_km, bearing)


def is_flight_in_airspace(
    flight: Flight,
    airspace: Airspace,
    locate: LocationResolver,
    query_time: Optional[datetime] = None,
    clock: Clock = utc_now,
) -> bool:
    """
    Check whether a flight is inside an airspace at query_time.

    Raises:
        UnknownLocation if either aerodrome cannot be resolved.
        InvalidAirspaceRange if the airspace corners are not a valid span.
    """
    position = compute_position(flight, locate, query_time, clock)
    return is_within_airspace(airspace, position)
