"""Mini README: Entry point CLI for launching the Budget Desk web page.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port, and production flags. Logging is configured from
settings before the server boots, and settings fall back to ``BUDGETDESK_``
environment variables when options are omitted.
"""

from __future__ import annotations

import typer
import uvicorn

from budgetdesk.configuration import get_settings
from budgetdesk.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the Budget Desk single-page budget tracker.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the wildcard address, so point them at loopback.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting {settings.app_title} on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    if not production:
        typer.echo("Auto-reload is on; entries are kept in memory and reset on every reload.")
    uvicorn.run(
        "budgetdesk.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
