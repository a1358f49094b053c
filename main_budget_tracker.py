"""Mini README: Entry point CLI for launching the budget tracker dashboard.

This script exposes a Typer CLI that starts the FastAPI dashboard with
configurable host, port, and production flags. Defaults come from
``BUDGET_TRACKER_*`` environment variables when set.
"""

from __future__ import annotations

import typer
import uvicorn

from budget_tracker.configuration import get_settings
from budget_tracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the budget tracker dashboard.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting budget tracker on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "budget_tracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    cli()
