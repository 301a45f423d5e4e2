"""
Value types for flighttrack.

All types are immutable and built fresh per request:
1. Coordinate - longitude/latitude pair in decimal degrees
2. Flight - aerodrome identifiers plus departure/arrival times
3. Airspace - lon/lat rectangle, possibly wrapping the antimeridian
"""

from flighttrack.models.coordinate import Coordinate
from flighttrack.models.flight import Flight, as_utc, parse_timestamp
from flighttrack.models.airspace import Airspace, is_within_airspace

__all__ = [
    'Coordinate',
    'Flight',
    'parse_timestamp',
    'as_utc',
    'Airspace',
    'is_within_airspace',
]
