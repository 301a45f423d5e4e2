"""
Flight service - resolves flights and aerodromes, then asks the
position engine where the flight is.

Each position query makes one flight lookup and two aerodrome lookups
against the data store. Nothing is cached between requests.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from flighttrack.datastore.client import DataStoreClient
from flighttrack.errors import DataStoreError, UnknownLocation
from flighttrack.geo.position import Clock, compute_position, is_flight_in_airspace, utc_now
from flighttrack.models import Airspace, Coordinate, Flight

logger = logging.getLogger(__name__)


class FlightService:
    """
    Flight operations backed by the data store.

    The clock is injectable so "now" can be pinned in tests.
    """

    def __init__(self, client: DataStoreClient, clock: Clock = utc_now):
        self.client = client
        self.clock = clock

    @classmethod
    def from_config(cls) -> 'FlightService':
        """Create service with a data store client from configuration."""
        return cls(DataStoreClient.from_config())

    def create_flight(self, payload: dict) -> Any:
        """Store a new flight record."""
        logger.info(
            f'Creating flight {payload.get("departureAerodrome")} -> {payload.get("arrivalAerodrome")}'
        )
        return self.client.post('flights', payload)

    def get_flights(self) -> List[dict]:
        """List all flight records."""
        return self.client.get('flights')

    def get_airports(self) -> List[dict]:
        """List all airport records."""
        return self.client.get('airports')

    def get_flight(self, flight_id: str) -> Flight:
        """
        Fetch a single flight.

        Raises:
            DataStoreError if the record cannot be fetched or is malformed
        """
        record = self.client.get(f'flights/{flight_id}')
        try:
            return Flight.from_record(record or {})
        except (ValueError, AttributeError) as e:
            raise DataStoreError(f'Flight {flight_id} has an invalid record: {e}') from e

    def locate_aerodrome(self, iata: str) -> Coordinate:
        """
        Resolve an aerodrome code to its coordinate.

        Uses the first airport record matching the code.

        Raises:
            UnknownLocation if the lookup fails or matches nothing
        """
        try:
            airports = self.client.get('airports', params={'iata': iata})
        except DataStoreError as e:
            logger.warning(f'Aerodrome lookup failed for {iata}: {e}')
            raise UnknownLocation(iata) from e

        if not airports:
            raise UnknownLocation(iata)

        airport = airports[0]
        try:
            return Coordinate(
                longitude=float(airport['longitude']),
                latitude=float(airport['latitude']),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f'Aerodrome {iata} has no usable coordinates: {airport}')
            raise UnknownLocation(iata) from e

    def get_flight_position(self, flight_id: str, at_time: Optional[datetime] = None) -> Coordinate:
        """Position of a flight at at_time, or now if omitted."""
        flight = self.get_flight(flight_id)
        position = compute_position(flight, self.locate_aerodrome, at_time, self.clock)
        logger.debug(f'Flight {flight_id} at {at_time or "now"}: {position}')
        return position

    def is_flight_in_airspace(
        self,
        flight_id: str,
        bottom_left_x: float,
        bottom_left_y: float,
        top_right_x: float,
        top_right_y: float,
        at_time: Optional[datetime] = None,
    ) -> bool:
        """
        Check a flight's position against an airspace given by corner values.

        x is longitude, y is latitude.
        """
        airspace = Airspace(
            bottom_left=Coordinate(longitude=bottom_left_x, latitude=bottom_left_y),
            top_right=Coordinate(longitude=top_right_x, latitude=top_right_y),
        )
        flight = self.get_flight(flight_id)
        return is_flight_in_airspace(flight, airspace, self.locate_aerodrome, at_time, self.clock)
