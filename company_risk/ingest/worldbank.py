"""
World Bank Indicators Client

Fetches the Control of Corruption percentile rank (CC.PER.RNK) for a
country from the public World Bank API.

The API answers with a two-element array: paging metadata first, then
the data points, most recent year first.
"""

import logging
from typing import Any

import httpx

from company_risk import NO_DATA
from company_risk.config import Settings, build_http_client

logger = logging.getLogger(__name__)


class WorldBankClient:
    """Client for World Bank country indicators."""

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        self.base_url = settings.worldbank_base_url.rstrip("/")
        self.indicator = settings.worldbank_indicator
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

    def fetch_corruption_rank(self, country_code: str) -> Any:
        """
        Get the latest corruption rank for a country.

        Args:
            country_code: ISO 3166 alpha-2 or alpha-3 code.

        Returns:
            The indicator value, or NO_DATA if the request failed or the
            response carries no value.
        """
        url = f"{self.base_url}/{country_code}/indicator/{self.indicator}"

        try:
            response = self.client.get(url, params={"format": "json"})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching World Bank data for {country_code}: {e}")
            return NO_DATA

        try:
            payload = response.json()
        except ValueError:
            return NO_DATA

        return extract_indicator_value(payload)


def extract_indicator_value(payload: Any) -> Any:
    """Pull the first data point's value out of an indicator response."""
    try:
        value = payload[1][0]["value"]
    except (IndexError, KeyError, TypeError):
        return NO_DATA
    return NO_DATA if value is None else value
