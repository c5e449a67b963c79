"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import load_settings
from ..core import print_cluster_description
from ..model.report import ReportFormat
from ..ocm import OCMConnection
from ..upgrade import find_next_upgrade
from ..utils.logger import get_logger, set_log_level

# Create CLI app
app = typer.Typer(
    name="ocm-describe",
    help="Describe clusters managed by OpenShift Cluster Manager",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)

URL_OPTION = typer.Option(None, "--url", help="OCM API URL (default: $OCM_URL or config file)")
TOKEN_OPTION = typer.Option(
    None, "--token", help="OCM access token (default: $OCM_TOKEN or config file)"
)
CONFIG_OPTION = typer.Option(
    None, "--config", help="Path to the OCM configuration file (default: ~/.config/ocm/ocm.json)"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Log requests sent to OCM")


def _connect(
    url: Optional[str], token: Optional[str], config: Optional[Path], debug: bool
) -> OCMConnection:
    """Load settings and open a connection to OCM."""
    settings = load_settings(url=url, token=token, config_path=config)
    set_log_level("DEBUG" if debug else settings.log_level)

    logger.debug(f"Connecting to {settings.url}")
    return OCMConnection(
        url=settings.url, token=settings.require_token(), timeout=settings.timeout
    )


@app.command()
def cluster(
    key: str = typer.Argument(..., help="Cluster identifier, name or external identifier"),
    format: ReportFormat = typer.Option(
        ReportFormat.TEXT, "--format", "-f", help="Format for the cluster description"
    ),
    url: Optional[str] = URL_OPTION,
    token: Optional[str] = TOKEN_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """Show the details of a cluster."""
    try:
        with _connect(url, token, config, debug) as connection:
            found = connection.find_cluster(key)
            print_cluster_description(connection, found, format, console=console)

    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def upgrade(
    key: str = typer.Argument(..., help="Cluster identifier, name or external identifier"),
    url: Optional[str] = URL_OPTION,
    token: Optional[str] = TOKEN_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
):
    """Show the next scheduled upgrade of a cluster."""
    try:
        with _connect(url, token, config, debug) as connection:
            found = connection.find_cluster(key)
            next_upgrade = find_next_upgrade(connection, found.id)

        if not next_upgrade:
            console.print("[yellow]Upgrade information is not available[/yellow]")
            raise typer.Exit(1)

        console.print(next_upgrade, markup=False, highlight=False, emoji=False, soft_wrap=True)

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
