"""
HTTP client for the remote flight data store.

Handles communication with the data store REST API:
- GET with query parameters (e.g. airports?iata=JFK)
- POST/PUT with JSON bodies
- DELETE
- Translating transport and HTTP failures into DataStoreError

Record formats:
    flights:  {id, departureAerodrome, departureTime, arrivalAerodrome, arrivalTime}
    airports: {iata, name, latitude, longitude}
"""

import logging
from typing import Any, Optional

import requests

from flighttrack.config import config
from flighttrack.errors import DataStoreError

logger = logging.getLogger(__name__)


class DataStoreClient:
    """
    Client for the flight data store.

    Handles:
    - Base URL joining
    - A shared requests.Session for connection reuse
    - Per-request timeout
    - Error translation (requests exceptions -> DataStoreError)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/') if base_url else None
        self.timeout = timeout
        self.session = session or requests.Session()

        if not self.base_url:
            logger.warning('Data store client created without DB_URL, requests will fail')

    @classmethod
    def from_config(cls) -> 'DataStoreClient':
        """Create client from application configuration."""
        return cls(
            base_url=config.datastore.url,
            timeout=config.datastore.timeout_seconds,
        )

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise DataStoreError('DB_URL is not defined')
        return f'{self.base_url}/{path.lstrip("/")}'

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and decode the JSON response.

        Raises:
            DataStoreError on network errors, non-2xx status or invalid JSON
        """
        url = self._url(path)
        logger.debug(f'{method} {url} params={kwargs.get("params")}')

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.error(f'Data store timeout: {method} {url}')
            raise DataStoreError(f'{method} {url} timed out') from e
        except requests.exceptions.RequestException as e:
            logger.error(f'Data store request failed: {e}')
            raise DataStoreError(f'{method} {url} failed: {e}') from e

        if not response.ok:
            logger.warning(f'Data store error: {method} {url} -> {response.status_code}')
            raise DataStoreError(
                f'{method} {url} failed with status {response.status_code}',
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise DataStoreError(f'{method} {url} returned invalid JSON') from e

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        """Fetch a resource, optionally filtered by query parameters."""
        return self._request('GET', path, params=params)

    def post(self, path: str, data: Any) -> Any:
        """Create a resource from a JSON body."""
        return self._request('POST', path, json=data)

    def put(self, path: str, data: Any) -> Any:
        """Replace a resource with a JSON body."""
        return self._request('PUT', path, json=data)

    def delete(self, path: str) -> Any:
        """Delete a resource."""
        return self._request('DELETE', path)
