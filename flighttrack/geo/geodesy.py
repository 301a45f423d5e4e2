"""
Spherical geodesy primitives.

All angles are in decimal degrees unless a name says otherwise.
Distances are in kilometres on a sphere of radius EARTH_RADIUS_KM,
used by every function here so distances and projections agree.
"""

import math

from flighttrack.models.coordinate import Coordinate

# Mean Earth radius (km)
EARTH_RADIUS_KM = 6371.0

# 4 decimals of a degree is roughly 11 m
COORDINATE_PRECISION = 4


def to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Convert an angle from radians to degrees."""
    return radians * 180 / math.pi


def haversine(c1: Coordinate, c2: Coordinate) -> float:
    """
    Great-circle distance between two coordinates (haversine formula).

    Crossing the antimeridian needs no special case: the sin^2 of half the
    longitude delta is the same for 358 degrees and -2 degrees.

    Returns:
        Distance in kilometres.
    """
    d_lat = to_radians(c2.latitude - c1.latitude)
    d_lon = to_radians(c2.longitude - c1.longitude)
    lat1 = to_radians(c1.latitude)
    lat2 = to_radians(c2.latitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.sin(d_lon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    )
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def initial_bearing(c1: Coordinate, c2: Coordinate) -> float:
    """
    Forward azimuth from c1 towards c2.

    Returns:
        Bearing in [0, 360), 0 = north, 90 = east, clockwise.
    """
    lat1 = to_radians(c1.latitude)
    lat2 = to_radians(c2.latitude)
    d_lon = to_radians(c2.longitude - c1.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = (
        math.cos(lat1) * math.sin(lat2)
        - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    )
    bearing = to_degrees(math.atan2(y, x))
    return (bearing + 360) % 360


def _normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into (-180, 180]."""
    wrapped = (longitude + 540) % 360 - 180
    return 180.0 if wrapped == -180 else wrapped


def destination_point(start: Coordinate, distance_km: float, bearing: float) -> Coordinate:
    """
    Project a point along a great circle (spherical direct problem).

    Args:
        start: Starting coordinate
        distance_km: Distance to travel along the surface
        bearing: Initial bearing in degrees, clockwise from north

    Returns:
        Destination coordinate, longitude in (-180, 180], both components
        rounded to 4 decimal places.
    """
    delta = distance_km / EARTH_RADIUS_KM
    lat1 = to_radians(start.latitude)
    lon1 = to_radians(start.longitude)
    brng = to_radians(bearing)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(brng)
    )
    lon2 = lon1 + math.atan2(
        math.sin(brng) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    # Wrap again after rounding: -179.99996 rounds to -180.0
    longitude = _normalize_longitude(
        round(_normalize_longitude(to_degrees(lon2)), COORDINATE_PRECISION)
    )
    latitude = round(to_degrees(lat2), COORDINATE_PRECISION)

    return Coordinate(longitude=longitude, latitude=latitude)
