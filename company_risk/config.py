"""
Configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files.
Provides type-safe access to all configuration values.
"""

from pathlib import Path
from functools import lru_cache

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables can be set directly or via a .env file.
    Credentials default to None; every other setting has a working default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Input / Output Files
    # ==========================================================================

    input_file: Path = Field(
        default=Path("list_2.csv"),
        description="CSV file with a 'name' column listing the companies to enrich",
    )

    output_file: Path = Field(
        default=Path("enriched_list_2.csv"),
        description="Enriched CSV written at the end of a run",
    )

    report_file: Path = Field(
        default=Path("risk_report.txt"),
        description="Plain-text risk report written at the end of a run",
    )

    # ==========================================================================
    # Run Configuration
    # ==========================================================================

    company_limit: int = Field(
        default=5,
        ge=0,
        description="Maximum number of input companies processed per run (0 = all)",
    )

    sanctions_name_column: int = Field(
        default=0,
        ge=0,
        description="Field of each sanctions row compared against company names",
    )

    # ==========================================================================
    # Sayari Configuration
    # ==========================================================================

    sayari_client_id: str | None = Field(
        default=None,
        description="OAuth client id for the Sayari API",
    )

    sayari_client_secret: str | None = Field(
        default=None,
        description="OAuth client secret for the Sayari API",
    )

    sayari_token_url: str = Field(
        default="https://api.sayari.com/oauth/token",
        description="Sayari OAuth token endpoint",
    )

    sayari_search_url: str = Field(
        default="https://api.sayari.com/v1/search/entity",
        description="Sayari entity search endpoint",
    )

    sayari_audience: str = Field(default="sayari.com")

    # ==========================================================================
    # OFAC Configuration
    # ==========================================================================

    ofac_sdn_url: str = Field(
        default="https://www.treasury.gov/ofac/downloads/sdn.csv",
        description="Download URL of the OFAC SDN list in CSV form",
    )

    # ==========================================================================
    # World Bank Configuration
    # ==========================================================================

    worldbank_base_url: str = Field(
        default="https://api.worldbank.org/v2/country",
        description="Base URL for World Bank country indicators",
    )

    worldbank_indicator: str = Field(
        default="CC.PER.RNK",
        description="Control of Corruption percentile rank indicator",
    )

    # ==========================================================================
    # Geolocation Configuration
    # ==========================================================================

    geolocation_api_key: str | None = Field(
        default=None,
        description="positionstack API access key",
    )

    geolocation_base_url: str = Field(
        default="http://api.positionstack.com/v1/forward",
        description="positionstack forward geocoding endpoint",
    )

    # ==========================================================================
    # HTTP Client Configuration
    # ==========================================================================

    http_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @property
    def sayari_configured(self) -> bool:
        """Whether both Sayari OAuth credentials are present."""
        return bool(self.sayari_client_id and self.sayari_client_secret)


def build_http_client(settings: Settings) -> httpx.Client:
    """
    Create the HTTP client shared by the service clients.

    One client is enough for a run: every request is made sequentially.
    """
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout),
        follow_redirects=True,
        limits=httpx.Limits(max_keepalive_connections=5),
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
