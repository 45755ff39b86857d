"""
Data ingestion modules for the company list and the external risk sources.

Modules:
    companies: Read company names from the input CSV
    ofac: Download the OFAC SDN list and match names against it
    sayari: Query the Sayari entity search API
    worldbank: Query World Bank country corruption indicators
    geolocation: Query positionstack forward geocoding
"""

from company_risk.ingest.companies import load_company_names
from company_risk.ingest.geolocation import GeolocationClient
from company_risk.ingest.ofac import OFACSanctionsClient, is_sanctioned
from company_risk.ingest.sayari import EntityProfile, SayariClient
from company_risk.ingest.worldbank import WorldBankClient

__all__ = [
    "load_company_names",
    "GeolocationClient",
    "OFACSanctionsClient",
    "is_sanctioned",
    "EntityProfile",
    "SayariClient",
    "WorldBankClient",
]
