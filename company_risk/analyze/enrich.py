"""
Company Enrichment Pipeline

Drives every company through the external sources, one after another:

    Sayari entity search -> positionstack geolocation
        -> World Bank corruption rank (only if Sayari returned a country)
        -> OFAC SDN name match -> risk classification

Any source that fails or has nothing for a company contributes the
"No data found" placeholder; a row is always produced.

Usage:
    from company_risk.analyze.enrich import enrich_companies

    rows, summary = enrich_companies()
    print(f"{summary.high_risk_count} of {summary.total} are high risk")
"""

import logging
from typing import Any

import httpx

from company_risk import NO_DATA
from company_risk.analyze.models import EnrichedRow, RunSummary
from company_risk.analyze.report import write_enriched_csv, write_report
from company_risk.analyze.risk import calculate_risk_level
from company_risk.config import Settings, build_http_client, get_settings
from company_risk.ingest.companies import load_company_names
from company_risk.ingest.geolocation import GeolocationClient
from company_risk.ingest.ofac import OFACSanctionsClient, SanctionsRow, is_sanctioned
from company_risk.ingest.sayari import EntityProfile, SayariClient
from company_risk.ingest.worldbank import WorldBankClient

logger = logging.getLogger(__name__)


def _or_no_data(value: Any) -> Any:
    """Replace a missing or empty value (None, 0, "", []) with NO_DATA."""
    return value or NO_DATA


class CompanyRiskEnricher:
    """
    Runs the per-company enrichment sequence.

    All four service clients share one HTTP client. Clients can be passed
    in (e.g. built around a mock transport); missing ones are built from
    the settings.

    Example:
        >>> with CompanyRiskEnricher(settings) as enricher:
        ...     rows, summary = enricher.run(["Acme Corp", "Globex"])
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.Client | None = None,
        sayari: SayariClient | None = None,
        geolocation: GeolocationClient | None = None,
        world_bank: WorldBankClient | None = None,
        ofac: OFACSanctionsClient | None = None,
    ):
        self.settings = settings

        # Only needed when at least one service client is built here
        needs_client = None in (sayari, geolocation, world_bank, ofac)
        self._owns_client = client is None and needs_client
        self.client = client or (build_http_client(settings) if needs_client else None)

        self.sayari = sayari or SayariClient(settings, client=self.client)
        self.geolocation = geolocation or GeolocationClient(settings, client=self.client)
        self.world_bank = world_bank or WorldBankClient(settings, client=self.client)
        self.ofac = ofac or OFACSanctionsClient(settings, client=self.client)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the shared HTTP client if this object created it."""
        if self._owns_client:
            self.client.close()

    def enrich_company(self, company: str, sanctions_list: list[SanctionsRow]) -> EnrichedRow:
        """
        Build the output row for one company.

        Args:
            company: Company name from the input file.
            sanctions_list: Parsed SDN list, fetched once per run.
        """
        logger.info(f"Fetching data for: {company}")

        profile: EntityProfile | None = self.sayari.search_entity(company)
        location = self.geolocation.fetch_company_location(company)

        country = profile.primary_country if profile else None
        corruption_rank = (
            self.world_bank.fetch_corruption_rank(country) if country else NO_DATA
        )

        sanctioned = (
            "Yes"
            if is_sanctioned(company, sanctions_list, self.settings.sanctions_name_column)
            else "No"
        )

        aml_risk = _or_no_data(profile.aml_risk if profile else None)
        cpi_risk = _or_no_data(profile.cpi_score if profile else None)
        negative_media = _or_no_data(profile.negative_media_count if profile else None)

        return EnrichedRow(
            company_name=company,
            entity_name=_or_no_data(profile.label if profile else None),
            risk_score=aml_risk,
            aml_risk_score=aml_risk,
            cpi_risk_score=cpi_risk,
            negative_media_mentions=negative_media,
            ofac_sanctioned=sanctioned,
            country_corruption_rank=corruption_rank,
            geolocation=location,
            overall_risk=calculate_risk_level(aml_risk, cpi_risk, sanctioned),
        )

    def run(self, companies: list[str]) -> tuple[list[EnrichedRow], RunSummary]:
        """
        Enrich every company in order.

        Args:
            companies: Company names to process.

        Returns:
            Tuple of (rows, summary)
        """
        sanctions_list = self.ofac.load_sanctions_list()
        if not sanctions_list:
            logger.warning(
                "Sanctions list is empty; no company will be marked as sanctioned"
            )

        rows: list[EnrichedRow] = []
        summary = RunSummary(total=len(companies))

        for company in companies:
            row = self.enrich_company(company, sanctions_list)
            summary.record(row)
            rows.append(row)

        return rows, summary


def enrich_companies(
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> tuple[list[EnrichedRow], RunSummary]:
    """
    Complete enrichment run.

    Loads the input file, applies the configured company limit, enriches
    each company and writes the CSV and text report.

    Args:
        settings: Application settings. Defaults to get_settings().
        client: Optional HTTP client shared by all service clients.

    Returns:
        Tuple of (rows, summary)

    Raises:
        FileNotFoundError: If the input file does not exist.
    """
    settings = settings or get_settings()

    companies = load_company_names(settings.input_file)
    if settings.company_limit:
        companies = companies[: settings.company_limit]
    logger.info(f"Loaded {len(companies)} companies. Fetching data...")

    with CompanyRiskEnricher(settings, client=client) as enricher:
        rows, summary = enricher.run(companies)

    write_enriched_csv(rows, settings.output_file)
    logger.info(f"Data saved to {settings.output_file}")

    write_report(rows, summary, settings.report_file)
    logger.info(f"Risk report saved to {settings.report_file}")

    return rows, summary
