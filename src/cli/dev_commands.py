"""Server and database CLI commands."""

import typer
import uvicorn
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from src.catalog.runtime.context import get_config

console = Console()

dev_app = typer.Typer(help="Server and database commands")


@dev_app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """Start the API server with uvicorn."""
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Product Catalog API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")

    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@dev_app.command(name="init-db")
def init_db_command() -> None:
    """Create the database tables."""
    from src.catalog.runtime.init_db import init_db

    init_db()
    console.print("[green]Database tables created[/green]")


@dev_app.command(name="show-config")
def show_config() -> None:
    """Print the effective configuration, with secrets masked."""
    data = get_config().model_dump(mode="json", exclude={"database": {"password"}})
    for key in ("url", "connection_string"):
        if data["database"].get(key):
            data["database"][key] = _mask_password(data["database"][key])
    console.print(Syntax(yaml.safe_dump({"config": data}, sort_keys=False), "yaml"))


def _mask_password(url: str) -> str:
    from sqlalchemy.engine import make_url

    return make_url(url).render_as_string(hide_password=True)
