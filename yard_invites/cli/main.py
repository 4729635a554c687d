"""
yard-invites CLI - run and exercise the invitation notifier.

Usage:
    yard-invites serve       Run the HTTP service
    yard-invites backend     Show which delivery backend is configured
    yard-invites invites     Render or send invitation emails
"""

import typer
from rich.console import Console

from ..config import load_config
from ..delivery import select_backend
from ..exceptions import ConfigurationError
from ..log import configure_logging
from .commands import invites

# Create the main Typer app
app = typer.Typer(
    name="yard-invites",
    help="Invitation email notifier for Yard",
    add_completion=False,
)

console = Console()

app.add_typer(invites.app, name="invites")


@app.command("serve")
def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
) -> None:
    """Run the notifier HTTP service with uvicorn."""
    import uvicorn

    from ..integrations.fastapi import create_app

    config = load_config()
    configure_logging(config.effective_log_level)

    try:
        application = create_app(config)
    except ConfigurationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    uvicorn.run(application, host=host, port=port, log_config=None)


@app.command("backend")
def backend_command() -> None:
    """Show which delivery backend the current configuration selects."""
    config = load_config()

    try:
        backend = select_backend(config)
    except ConfigurationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"Delivery backend: [cyan]{backend.name}[/cyan]")
    console.print(f"Site URL: {config.site_url or '[yellow]not set (fallback)[/yellow]'}")


@app.callback()
def callback() -> None:
    """
    Yard invitation notifier.

    Renders invitation emails and delivers them through Resend, Supabase
    auth invites, or nowhere (log only).
    """
    pass


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
