"""
Input loader for the list of companies to enrich.
"""

import logging
from pathlib import Path

import polars as pl

logger = logging.getLogger(__name__)


def load_company_names(path: Path, column: str = "name") -> list[str]:
    """
    Read company names from a CSV file.

    Every column is read as a string so numeric-looking names survive
    unchanged. Rows with an empty name are dropped; file order is kept and
    names are neither trimmed nor deduplicated.

    Args:
        path: CSV file with a header row.
        column: Header of the column holding company names.

    Returns:
        Company names in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        polars.exceptions.ColumnNotFoundError: If the column is missing.
    """
    logger.info(f"Loading company names from {path}")

    df = pl.read_csv(path, columns=[column], infer_schema_length=0)
    names = (
        df.filter(pl.col(column).is_not_null() & (pl.col(column) != ""))
        .get_column(column)
        .to_list()
    )

    logger.info(f"Loaded {len(names):,} companies")
    return names
