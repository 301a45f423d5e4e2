"""
Service layer.

Connects the remote data store to the geodesic position engine.
"""

from flighttrack.services.flight_service import FlightService

__all__ = ['FlightService']
