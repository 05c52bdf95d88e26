"""Mini README: Entry point CLI for launching the Pocket Ledger service.

Run ``python ledger_centre.py run`` (or the ``pocketledger`` console script)
to serve the JSON API. Host, port and log level fall back to the
``POCKETLEDGER_*`` settings when options are omitted, and auto-reload is
only enabled outside the ``production`` environment.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from pocketledger.configuration import get_settings
from pocketledger.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Launch the Pocket Ledger JSON service.")


@cli.command()
def run(
    host: Optional[str] = typer.Option(None, help="Host interface to bind."),
    port: Optional[int] = typer.Option(None, help="Port to listen on."),
    log_level: Optional[str] = typer.Option(None, help="Logging level name, e.g. DEBUG."),
) -> None:
    """Serve the ledger API with uvicorn."""

    settings = get_settings()
    try:
        configure_root_logger(log_level)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--log-level") from error

    bind_host = host or settings.interface_host
    bind_port = port or settings.interface_port
    reload = settings.environment != "production"
    LOGGER.info(
        "Serving ledger '%s' from %s backend (reload=%s)",
        settings.storage_key,
        settings.storage_backend,
        reload,
    )
    typer.echo(f"Pocket Ledger API docs: http://{bind_host}:{bind_port}/docs")
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=bind_host,
        port=bind_port,
        factory=True,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
