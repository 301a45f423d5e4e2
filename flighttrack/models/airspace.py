"""
Rectangular airspace in longitude/latitude space.

The longitude span is read from the raw corner values:
    lon_diff = top_right.longitude - bottom_left.longitude

- lon_diff < 0 or lon_diff > 360: rejected (InvalidAirspaceRange)
- 180 < lon_diff <= 360: wraps the antimeridian, longitude bounds are
  disjunctive (lon >= min OR lon <= max)
- 0 <= lon_diff <= 180: ordinary rectangle, bounds are conjunctive

Corner values are never re-normalised. A box written as 170 -> -170 is
rejected rather than guessed at. Latitude never wraps. Edges are inclusive.
"""

from dataclasses import dataclass

from flighttrack.errors import InvalidAirspaceRange
from flighttrack.models.coordinate import Coordinate


@dataclass(frozen=True)
class Airspace:
    """Axis-aligned lon/lat rectangle given by its two opposite corners."""
    bottom_left: Coordinate
    top_right: Coordinate

    @property
    def lon_diff(self) -> float:
        return self.top_right.longitude - self.bottom_left.longitude

    @property
    def wraps_antimeridian(self) -> bool:
        return self._checked_lon_diff() > 180

    def _checked_lon_diff(self) -> float:
        lon_diff = self.lon_diff
        if lon_diff < 0 or lon_diff > 360:
            raise InvalidAirspaceRange(lon_diff)
        return lon_diff

    def contains(self, position: Coordinate) -> bool:
        """
        Check whether a position lies inside this airspace.

        Raises:
            InvalidAirspaceRange if the corners do not describe a valid span.
        """
        lon = position.longitude
        lat = position.latitude
        min_lon = self.bottom_left.longitude
        max_lon = self.top_right.longitude

        if self._checked_lon_diff() > 180:
            in_lon = lon >= min_lon or lon <= max_lon
        else:
            in_lon = min_lon <= lon <= max_lon

        in_lat = self.bottom_left.latitude <= lat <= self.top_right.latitude
        return in_lon and in_lat


def is_within_airspace(airspace: Airspace, point: Coordinate) -> bool:
    """Return True if point lies inside airspace (edges inclusive)."""
    return airspace.contains(point)
