"""
Command Line Interface for Company Risk Enricher

Usage:
    cre run        # Enrich the configured company list and write reports
    cre config     # Show the effective configuration

Paths, credentials and the company limit are read from the environment
or a .env file (see company_risk.config.Settings).
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from company_risk.config import get_settings

# Create CLI app
app = typer.Typer(
    name="cre",
    help="Company Risk Enricher - Enrich companies with AML, sanctions, corruption and location data",
    add_completion=False,
)

# Rich console for pretty output
console = Console()


def setup_logging(verbose: bool = False):
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else get_settings().log_level

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Company Risk Enricher CLI

    Look up each company in Sayari, OFAC, the World Bank and positionstack,
    classify its risk and write an enriched CSV plus a text report.
    """
    setup_logging(verbose)


@app.command("run")
def run_cmd():
    """
    Enrich the input company list.

    Reads the configured input CSV, processes up to COMPANY_LIMIT companies
    and writes the enriched CSV and risk report.
    """
    from company_risk.analyze.enrich import enrich_companies

    settings = get_settings()

    console.print(f"\n[bold blue]Enriching companies from {settings.input_file}[/bold blue]\n")

    if not settings.input_file.exists():
        console.print(f"[red]Error: input file not found: {settings.input_file}[/red]")
        raise typer.Exit(1)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Fetching company data...", total=None)

        rows, summary = enrich_companies(settings)

        progress.update(task, completed=True)

    # Display summary
    table = Table(title="Risk Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Companies Processed", f"{summary.total:,}")
    table.add_row("High / Very High Risk", f"{summary.high_risk_count:,}")
    table.add_row("Sanctioned", f"{summary.sanctioned_count:,}")
    table.add_row("No Negative Media", f"{summary.low_media_mentions:,}")

    console.print(table)

    levels = Table(title="Companies")
    levels.add_column("Company")
    levels.add_column("Risk Level")
    levels.add_column("Sanctioned")
    for row in rows:
        levels.add_row(row.company_name[:50], row.overall_risk, row.ofac_sanctioned)

    console.print(levels)
    console.print(f"\n[green]✓ Data saved to {settings.output_file}[/green]")
    console.print(f"[green]✓ Risk report saved to {settings.report_file}[/green]\n")


@app.command("config")
def config_cmd():
    """
    Show the effective configuration.

    Credentials are reported only as configured or not set.
    """
    settings = get_settings()

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Input file", str(settings.input_file))
    table.add_row("Output CSV", str(settings.output_file))
    table.add_row("Risk report", str(settings.report_file))
    table.add_row("Company limit", str(settings.company_limit or "all"))
    table.add_row("Sayari credentials", "configured" if settings.sayari_configured else "[yellow]not set[/yellow]")
    table.add_row("Geolocation API key", "configured" if settings.geolocation_api_key else "[yellow]not set[/yellow]")
    table.add_row("OFAC SDN list", settings.ofac_sdn_url)
    table.add_row("World Bank indicator", settings.worldbank_indicator)
    table.add_row("HTTP timeout", f"{settings.http_timeout:g}s")

    console.print(table)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
