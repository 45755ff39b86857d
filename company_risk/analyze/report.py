"""
Output writers for an enrichment run: the enriched CSV and the plain-text
risk report.
"""

import logging
from pathlib import Path

import polars as pl

from company_risk.analyze.models import COLUMNS, EnrichedRow, RunSummary

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "----------------------"


def rows_to_frame(rows: list[EnrichedRow]) -> pl.DataFrame:
    """
    Build an all-string DataFrame from the rows.

    Score columns mix numbers and the placeholder text, so every cell is
    stored as Utf8.
    """
    records = [row.to_fields() for row in rows]
    data = {column: [record[i] for record in records] for i, column in enumerate(COLUMNS)}
    return pl.DataFrame(data, schema={column: pl.Utf8 for column in COLUMNS})


def write_enriched_csv(rows: list[EnrichedRow], path: Path) -> Path:
    """
    Write the header plus one line per row.

    Cells are comma-joined with no quoting, so a cell holding a comma
    (the "lon, lat" geolocation) spans two fields.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    rows_to_frame(rows).write_csv(path, quote_style="never")
    return path


def render_company_block(row: EnrichedRow) -> str:
    return (
        f"Company: {row.company_name}\n"
        f"Risk Level: {row.overall_risk}\n"
        f"Risk Score: {row.risk_score}\n"
        f"AML Risk Score: {row.aml_risk_score}\n"
        f"CPI Risk Score: {row.cpi_risk_score}\n"
        f"Negative Media Mentions: {row.negative_media_mentions}\n"
        f"Sanctioned: {row.ofac_sanctioned}\n"
        f"Country Corruption Rank: {row.country_corruption_rank}\n"
        f"Geolocation: {row.geolocation}\n"
        f"{BLOCK_SEPARATOR}\n"
    )


def render_summary(summary: RunSummary) -> str:
    return (
        "\nSummary:\n"
        f"- {summary.high_risk_count} out of {summary.total} companies are "
        "classified as HIGH risk due to AML/CPI risk factors.\n"
        f"- {summary.sanctioned_count} companies are sanctioned.\n"
        f"- {summary.low_media_mentions} companies have no negative media "
        "mentions, reducing reputational risk.\n"
    )


def render_report(rows: list[EnrichedRow], summary: RunSummary) -> str:
    """
    Render the risk report.

    One block per company, followed by the run summary. Blocks are joined
    with a newline, leaving a blank line between them.
    """
    sections = [render_company_block(row) for row in rows]
    sections.append(render_summary(summary))
    return "\n".join(sections)


def write_report(rows: list[EnrichedRow], summary: RunSummary, path: Path) -> Path:
    """Write the risk report to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(rows, summary), encoding="utf-8")
    return path
