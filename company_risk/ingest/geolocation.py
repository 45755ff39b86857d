"""
positionstack Geolocation Client

Forward-geocodes a company name and returns its coordinates as a single
"longitude, latitude" cell.

API Documentation: https://positionstack.com/documentation
"""

import logging
from typing import Any

import httpx

from company_risk import NO_DATA
from company_risk.config import Settings, build_http_client

logger = logging.getLogger(__name__)


class GeolocationClient:
    """
    Client for the positionstack forward geocoding API.

    Attributes:
        api_key: positionstack access key
        base_url: Forward geocoding endpoint
        client: HTTP client instance
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        self.api_key = settings.geolocation_api_key
        self.base_url = settings.geolocation_base_url

        if not self.api_key:
            logger.warning("No geolocation API key provided. Set GEOLOCATION_API_KEY.")

        self._owns_client = client is None
        self.client = client or build_http_client(settings)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP client if this object created it."""
        if self._owns_client:
            self.client.close()

    def fetch_company_location(self, company_name: str) -> str:
        """
        Geocode a company name.

        Args:
            company_name: Free-text query sent to positionstack.

        Returns:
            "<lon>, <lat>" for the first result, or NO_DATA.
        """
        try:
            response = self.client.get(
                self.base_url,
                params={"access_key": self.api_key or "", "query": company_name},
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching geolocation data for {company_name}: {e}")
            return NO_DATA

        return format_location(payload)


def format_location(payload: Any) -> str:
    """
    Format the first geocoding result as "lon, lat".

    positionstack answers an unmatched query with ``{"data": []}`` or
    ``{"data": [[]]}``; both yield NO_DATA, as does a result missing
    either coordinate.
    """
    results = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        return NO_DATA

    latitude = results[0].get("latitude")
    longitude = results[0].get("longitude")
    if latitude is None or longitude is None:
        return NO_DATA

    return f"{longitude}, {latitude}"
