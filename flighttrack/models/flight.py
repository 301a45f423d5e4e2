"""
Flight value type.

A Flight only knows which aerodromes it connects and when. Coordinates are
resolved on demand through a location resolver passed to the position
functions in flighttrack.geo.position.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def as_utc(value: datetime) -> datetime:
    """Convert to an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 string into an aware UTC datetime.

    Accepts a trailing 'Z' and the basic format (20240101T100000Z).
    Naive values are taken as UTC.
    Returns None for empty or unparseable input.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return as_utc(parsed)


def _format_timestamp(value: datetime) -> str:
    return as_utc(value).isoformat().replace('+00:00', 'Z')


@dataclass(frozen=True)
class Flight:
    """
    Scheduled flight between two aerodromes.

    departure_time < arrival_time is expected but not enforced.
    """
    departure_aerodrome: str
    departure_time: datetime
    arrival_aerodrome: str
    arrival_time: datetime

    @classmethod
    def from_record(cls, record: dict) -> 'Flight':
        """
        Build a Flight from a data store record.

        Raises:
            ValueError if an aerodrome or timestamp is missing or malformed.
        """
        departure_time = parse_timestamp(record.get('departureTime'))
        arrival_time = parse_timestamp(record.get('arrivalTime'))
        if departure_time is None or arrival_time is None:
            raise ValueError('Flight record has invalid departure or arrival time')

        departure = record.get('departureAerodrome')
        arrival = record.get('arrivalAerodrome')
        if not departure or not arrival:
            raise ValueError('Flight record is missing an aerodrome')

        return cls(
            departure_aerodrome=departure,
            departure_time=departure_time,
            arrival_aerodrome=arrival,
            arrival_time=arrival_time,
        )

    def to_dict(self) -> dict:
        """Convert to the camelCase shape used by the data store."""
        return {
            'departureAerodrome': self.departure_aerodrome,
            'departureTime': _format_timestamp(self.departure_time),
            'arrivalAerodrome': self.arrival_aerodrome,
            'arrivalTime': _format_timestamp(self.arrival_time),
        }
