from datetime import datetime, timezone

import pytest

from flighttrack.models import Flight
from flighttrack.services import FlightService
from tests.sample_data import (
    AIRPORT_RECORDS,
    ARRIVAL,
    DEPARTURE,
    FLIGHT_RECORDS,
    JFK,
    LAX,
    SFO,
    StubDataStore,
)


@pytest.fixture
def jfk_lax_flight() -> Flight:
    return Flight(
        departure_aerodrome='JFK',
        departure_time=DEPARTURE,
        arrival_aerodrome='LAX',
        arrival_time=ARRIVAL,
    )


@pytest.fixture
def locate():
    """Location resolver backed by a dict; unknown codes resolve to None."""
    known = {'JFK': JFK, 'LAX': LAX, 'SFO': SFO}
    return known.get


@pytest.fixture
def store() -> StubDataStore:
    return StubDataStore(flights=FLIGHT_RECORDS, airports=AIRPORT_RECORDS)


@pytest.fixture
def fixed_clock():
    """Clock pinned one hour after arrival of the JFK-LAX flight."""
    return lambda: datetime(2024, 1, 1, 13, 0, tzinfo=timezone.utc)


@pytest.fixture
def service(store, fixed_clock) -> FlightService:
    return FlightService(store, clock=fixed_clock)


@pytest.fixture
def app(service):
    from flighttrack.app import create_app
    app = create_app(flight_service=service)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
