"""
flighttrack Package.

Flight position tracking API built with Flask and requests.

Modules:
    api/         REST endpoints for flights, positions and airspace checks
    models/      Immutable value types (Coordinate, Flight, Airspace)
    geo/         Great-circle geodesy and position interpolation
    datastore/   HTTP client for the remote flight data store
    services/    Wiring between the data store and the position engine
    config.py    Centralized configuration from environment variables
    errors.py    Exception hierarchy surfaced to API callers
"""

__version__ = '1.0.0'
