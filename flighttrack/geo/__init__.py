"""
Geodesic position and containment engine.

Pure functions only: no I/O, no logging, no shared state. The single
suspension point is the location resolver handed to compute_position.
"""

from flighttrack.geo.geodesy import (
    EARTH_RADIUS_KM,
    to_radians,
    to_degrees,
    haversine,
    initial_bearing,
    destination_point,
)
from flighttrack.geo.position import (
    compute_position,
    is_flight_in_airspace,
    utc_now,
)

__all__ = [
    'EARTH_RADIUS_KM',
    'to_radians',
    'to_degrees',
    'haversine',
    'initial_bearing',
    'destination_point',
    'compute_position',
    'is_flight_in_airspace',
    'utc_now',
]
