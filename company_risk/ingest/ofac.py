"""
OFAC SDN Sanctions List Module

Downloads the US Treasury's Specially Designated Nationals (SDN) list in
its CSV form and checks company names against it.

The list is fetched once per run and kept in memory as raw field lists.
Matching is a case-insensitive substring test on a single field, so
"Acme Corp Holdings" on the list matches a company named "acme corp".

Usage:
    from company_risk.ingest.ofac import OFACSanctionsClient, is_sanctioned

    with OFACSanctionsClient(settings) as client:
        rows = client.load_sanctions_list()

    is_sanctioned("Acme Corp", rows)
"""

import logging

import httpx

from company_risk.config import Settings, build_http_client

logger = logging.getLogger(__name__)

SanctionsRow = list[str]


class OFACSanctionsClient:
    """
    Client for downloading the OFAC SDN list.

    Attributes:
        url: Download URL of the SDN CSV
        client: HTTP client instance
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None):
        """
        Initialize the OFAC client.

        Args:
            settings: Application settings.
            client: Shared HTTP client. A private one is created (and closed
                    by this object) when omitted.
        """
        self.url = settings.ofac_sdn_url
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

    def load_sanctions_list(self) -> list[SanctionsRow]:
        """
        Download and parse the SDN list.

        A failed download is logged and yields an empty list, so the run
        continues with nothing marked as sanctioned.

        Returns:
            One field list per line of the downloaded file.
        """
        logger.info(f"Downloading OFAC sanctions list from {self.url}")

        try:
            response = self.client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Error fetching OFAC sanctions list: {e}")
            return []

        rows = parse_sanctions_csv(response.text)
        logger.info(f"Loaded {len(rows):,} sanctions list rows")
        return rows


def parse_sanctions_csv(text: str) -> list[SanctionsRow]:
    """
    Split the SDN file into lines, then each line on commas.

    Quoted fields are not unescaped; only substring matching is done on
    the result.
    """
    return [line.split(",") for line in text.split("\n")]


def is_sanctioned(company: str, rows: list[SanctionsRow], column: int = 0) -> bool:
    """
    Check whether any sanctions row names the company.

    Args:
        company: Company name to look for.
        rows: Parsed sanctions list.
        column: Index of the field compared against the company name.

    Returns:
        True if a non-empty field at ``column`` contains the company name,
        ignoring case.
    """
    needle = company.lower()
    return any(
        len(row) > column and row[column] and needle in row[column].lower()
        for row in rows
    )
