"""
Remote data store access.

The data store is a JSON REST service holding flight and airport records.
"""

from flighttrack.datastore.client import DataStoreClient

__all__ = ['DataStoreClient']
