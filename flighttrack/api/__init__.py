"""
API module for flighttrack.

Provides REST endpoints for:
- Flight records (list, create, details)
- Airports
- Flight position and airspace checks
"""

from flighttrack.api.flights import flights_bp

__all__ = ['flights_bp']
