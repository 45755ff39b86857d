"""
Classification, enrichment and reporting.

Modules:
    risk: Risk level classification
    models: Output row and run summary records
    enrich: Per-company enrichment pipeline
    report: CSV and text report writers
"""

from company_risk.analyze.enrich import CompanyRiskEnricher, enrich_companies
from company_risk.analyze.models import EnrichedRow, RunSummary
from company_risk.analyze.risk import RiskLevel, calculate_risk_level

__all__ = [
    "CompanyRiskEnricher",
    "enrich_companies",
    "EnrichedRow",
    "RunSummary",
    "RiskLevel",
    "calculate_risk_level",
]
