"""
Exception hierarchy for flighttrack.

Every error raised on purpose by the package derives from FlightTrackError,
so the API layer can translate them into 4xx responses in one place.
"""

from typing import Optional


class FlightTrackError(Exception):
    """Base class for all flighttrack errors."""


class UnknownLocation(FlightTrackError):
    """An aerodrome identifier could not be resolved to a coordinate."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f'Aerodrome {code} not found')


class InvalidAirspaceRange(FlightTrackError):
    """Raw longitude span of an airspace is negative or exceeds 360 degrees."""

    def __init__(self, lon_diff: float):
        self.lon_diff = lon_diff
        super().__init__('Invalid airspace longitude range')


class DataStoreError(FlightTrackError):
    """The remote data store could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
