"""
Output records of an enrichment run.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from company_risk import NO_DATA
from company_risk.analyze.risk import RiskLevel

# CSV header, aligned positionally with EnrichedRow's fields
COLUMNS = [
    "Company Name",
    "Sayari Entity Name",
    "Sayari Risk Score",
    "AML Risk Score",
    "CPI Risk Score",
    "Negative Media Mentions",
    "OFAC Sanctioned",
    "Country Corruption Rank",
    "Geolocation (Lon, Lat)",
    "Overall Risk Level",
]


class EnrichedRow(BaseModel):
    """
    One output row, in CSV column order.

    Score fields hold whatever the source returned, or NO_DATA.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    company_name: str
    entity_name: str
    risk_score: Any
    aml_risk_score: Any
    cpi_risk_score: Any
    negative_media_mentions: Any
    ofac_sanctioned: str
    country_corruption_rank: Any
    geolocation: str
    overall_risk: RiskLevel

    @property
    def is_sanctioned(self) -> bool:
        return self.ofac_sanctioned == "Yes"

    def to_fields(self) -> list[str]:
        """Cell values as text, in CSV column order."""
        return [str(value) for value in self.model_dump().values()]


class RunSummary(BaseModel):
    """Counters rendered at the end of the risk report."""

    total: int = 0
    high_risk_count: int = 0
    sanctioned_count: int = 0
    low_media_mentions: int = 0

    def record(self, row: EnrichedRow) -> None:
        """Update the counters with a finished row."""
        if row.overall_risk in (RiskLevel.HIGH, RiskLevel.VERY_HIGH):
            self.high_risk_count += 1
        if row.is_sanctioned:
            self.sanctioned_count += 1
        if row.negative_media_mentions in (0, NO_DATA):
            self.low_media_mentions += 1
