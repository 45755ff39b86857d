"""
Company Risk Enricher

Enriches a list of company names with entity-risk, sanctions, country
corruption and geolocation data, then classifies each company and writes
a CSV plus a plain-text risk report.
"""

__version__ = "0.1.0"

# Placeholder written wherever an upstream value is absent or a call failed
NO_DATA = "No data found"
