"""
Sayari API Client Module

Looks up companies in Sayari's entity graph and returns the risk
attributes Sayari attaches to the best-matching entity: the Basel AML
index, the CPI score, negative media mentions and associated countries.

Authentication uses the OAuth client-credentials flow. A token is
requested before every search; tokens are not cached between lookups.

API Documentation: https://documentation.sayari.com/

Usage:
    from company_risk.ingest.sayari import SayariClient

    with SayariClient(settings) as client:
        profile = client.search_entity("Acme Corp")
        if profile:
            print(profile.label, profile.aml_risk)
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from company_risk.config import Settings, build_http_client

logger = logging.getLogger(__name__)

# Scores arrive as JSON numbers, occasionally as strings
RiskValue = int | float | str


class RiskFactor(BaseModel):
    """A single Sayari risk factor, e.g. ``basel_aml``."""

    model_config = ConfigDict(extra="ignore")

    value: RiskValue | None = None


class EntityRisk(BaseModel):
    """The subset of Sayari risk factors used for classification."""

    model_config = ConfigDict(extra="ignore")

    basel_aml: RiskFactor | None = None
    cpi_score: RiskFactor | None = None


class EntityProfile(BaseModel):
    """
    First search result for a company.

    Every field is optional: Sayari omits attributes it has no data for.

    Attributes:
        id: Sayari entity id
        label: Display name of the matched entity
        risk: Risk factors attached to the entity
        negative_media: Negative media mentions
        countries: ISO country codes associated with the entity
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    label: str | None = Field(None, description="Matched entity name")
    risk: EntityRisk | None = None
    negative_media: list[Any] | None = None
    countries: list[str] | None = None

    @property
    def aml_risk(self) -> RiskValue | None:
        """Basel AML index value, if present."""
        if self.risk and self.risk.basel_aml:
            return self.risk.basel_aml.value
        return None

    @property
    def cpi_score(self) -> RiskValue | None:
        """Corruption Perceptions Index value, if present."""
        if self.risk and self.risk.cpi_score:
            return self.risk.cpi_score.value
        return None

    @property
    def negative_media_count(self) -> int | None:
        """Number of negative media mentions, None when Sayari sent none."""
        if self.negative_media is None:
            return None
        return len(self.negative_media)

    @property
    def primary_country(self) -> str | None:
        """First associated country code."""
        return self.countries[0] if self.countries else None


class SayariClient:
    """
    Client for the Sayari entity search API.

    Attributes:
        client_id: OAuth client id
        client_secret: OAuth client secret
        token_url: OAuth token endpoint
        search_url: Entity search endpoint
        client: HTTP client instance

    Example:
        >>> client = SayariClient(settings)
        >>> profile = client.search_entity("Gazprom")
        >>> profile.countries
        ['RUS']
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        """
        Initialize the Sayari client.

        Args:
            settings: Application settings holding credentials and endpoints.
            client: Shared HTTP client. A private one is created (and closed
                    by this object) when omitted.
        """
        self.client_id = settings.sayari_client_id
        self.client_secret = settings.sayari_client_secret
        self.audience = settings.sayari_audience
        self.token_url = settings.sayari_token_url
        self.search_url = settings.sayari_search_url

        if not settings.sayari_configured:
            logger.warning(
                "Sayari credentials not configured. "
                "Set SAYARI_CLIENT_ID and SAYARI_CLIENT_SECRET."
            )

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

    def get_auth_token(self) -> str | None:
        """
        Request a bearer token with the client-credentials grant.

        Returns:
            The access token, or None if the request failed.
        """
        try:
            response = self.client.post(
                self.token_url,
                json={
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "audience": self.audience,
                    "grant_type": "client_credentials",
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Error fetching Sayari API token: {e.response.text}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching Sayari API token: {e}")
            return None

        return data.get("access_token") if isinstance(data, dict) else None

    def search_entity(self, company: str) -> EntityProfile | None:
        """
        Search for a company and return the top match.

        Args:
            company: Company name used as the search query.

        Returns:
            The first result, or None when authentication fails, the search
            fails or nothing matches.
        """
        token = self.get_auth_token()
        if not token:
            logger.error("Failed to get Sayari API token. Skipping request.")
            return None

        try:
            response = self.client.get(
                self.search_url,
                headers={"Authorization": f"Bearer {token}"},
                params={"q": company, "limit": 1},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Error fetching Sayari data for {company}: {e.response.text}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching Sayari data for {company}: {e}")
            return None

        results = payload.get("data") if isinstance(payload, dict) else None
        if not results or not isinstance(results, list):
            logger.debug(f"No Sayari entity found for {company}")
            return None

        try:
            return EntityProfile.model_validate(results[0])
        except ValidationError as e:
            logger.error(f"Unexpected Sayari result for {company}: {e}")
            return None
