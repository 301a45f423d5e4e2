"""
Coordinate value type.

Longitude comes first, matching the (x, y) order used by the data store.
No range validation happens here; the geodesy functions and the airspace
check apply their own range rules.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """
    Point on the Earth's surface in decimal degrees.

    Fields:
        longitude: -180 to +180, positive east
        latitude: -90 to +90, positive north
    """
    longitude: float
    latitude: float

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'longitude': self.longitude,
            'latitude': self.latitude,
        }
