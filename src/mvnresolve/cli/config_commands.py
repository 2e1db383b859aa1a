import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import (
    CONFIG_FILE,
    REPOSITORY_URL_KEY,
    USERNAME_KEY,
    TIMEOUT_KEY,
    load_settings,
    set_config_value,
)

app = typer.Typer()
console = Console()


def _set(key: str, value: str):
    try:
        set_config_value(key, value)
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {key} saved to {CONFIG_FILE}")


@app.command("set-url")
def set_url(url: str):
    """
    set the repository base URL.

    keep the trailing slash (e.g. https://repo.example.com/maven/),
    metadata paths are resolved relative to it.
    """
    if not url.endswith("/"):
        console.print("[yellow]Warning:[/yellow] URL has no trailing slash, its last segment will be replaced")
    _set(REPOSITORY_URL_KEY, url)


@app.command("set-username")
def set_username(username: str):
    """set the repository user. the password is read from MVNRESOLVE_PASSWORD."""
    _set(USERNAME_KEY, username)


@app.command("set-timeout")
def set_timeout(seconds: float = typer.Argument(..., min=0.1)):
    """set the request timeout in seconds."""
    _set(TIMEOUT_KEY, str(seconds))


@app.command("show")
def show():
    """show the effective configuration."""
    try:
        settings = load_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    table = Table(title="Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Repository URL", settings.repository_url or "[dim]not set[/dim]")
    table.add_row("Username", settings.username or "[dim]not set[/dim]")
    table.add_row("Password", "[dim]set[/dim]" if settings.password.get_secret_value() else "[dim]not set[/dim]")
    table.add_row("Timeout", f"{settings.timeout}s")

    console.print(table)
