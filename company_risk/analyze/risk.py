"""
Risk classification.

Maps a company's AML score, CPI score and sanctions status to one of four
ordinal risk levels. Rules are checked in order and the first match wins.
"""

import math
from enum import Enum
from typing import Any


class RiskLevel(str, Enum):
    """Overall risk level written to the CSV and report."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


# (aml_threshold, cpi_threshold) -> level; a score strictly above either
# threshold triggers the level
RISK_THRESHOLDS: list[tuple[float, float, RiskLevel]] = [
    (5, 80, RiskLevel.HIGH),
    (3, 60, RiskLevel.MEDIUM),
]


def to_number(value: Any) -> float | None:
    """
    Interpret a score as a number.

    Numeric strings are parsed; the "No data found" placeholder, any other
    text, None and NaN give None.
    """
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _exceeds(value: Any, threshold: float) -> bool:
    number = to_number(value)
    return number is not None and number > threshold


def calculate_risk_level(aml_risk: Any, cpi_risk: Any, sanctioned: str) -> RiskLevel:
    """
    Classify a company.

    A score that is not a number never exceeds a threshold, so a missing
    score can only lower the outcome.

    Args:
        aml_risk: Basel AML score or the NO_DATA placeholder.
        cpi_risk: CPI score or the NO_DATA placeholder.
        sanctioned: "Yes" or "No".

    Returns:
        VERY_HIGH if sanctioned, otherwise the first threshold tier either
        score exceeds, otherwise LOW.

    Example:
        >>> calculate_risk_level(6, 50, "No")
        <RiskLevel.HIGH: 'High'>
    """
    if sanctioned == "Yes":
        return RiskLevel.VERY_HIGH

    for aml_threshold, cpi_threshold, level in RISK_THRESHOLDS:
        if _exceeds(aml_risk, aml_threshold) or _exceeds(cpi_risk, cpi_threshold):
            return level

    return RiskLevel.LOW
