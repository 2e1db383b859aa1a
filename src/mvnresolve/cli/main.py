import asyncio
import logging
from typing import List, Optional

import typer
from pydantic import SecretStr, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..config import load_settings, Settings
from ..domain.models import Credentials
from ..registry.http import build_async_client
from ..registry.maven import MavenRepository
from ..services.versions import VersionsService
from .config_commands import app as config_app

app = typer.Typer()
console = Console()

app.add_typer(config_app, name="config", help="Manage repository configuration")


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


async def run_versions(settings: Settings, artifacts: List[str], newest_first: bool) -> int:
    credentials = Credentials(username=settings.username, password=settings.password)
    # one client for the whole run, shared by every resolution
    async with build_async_client(settings) as client:
        repository = MavenRepository(settings.repository_url, credentials, client)
        service = VersionsService(repository, console)
        return await service.show_versions(artifacts, newest_first=newest_first)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """resolve published versions of maven artifacts."""
    configure_logging(verbose)


@app.command()
def versions(
    artifacts: List[str] = typer.Argument(..., help="Artifacts as <GROUP>:<NAME>"),
    url: Optional[str] = typer.Option(None, "--url", help="Repository base URL"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Repository user"),
    newest_first: bool = typer.Option(False, "--newest-first", help="Sort versions descending"),
):
    """list the published versions of one or more artifacts."""
    try:
        settings = load_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=2)
    if url:
        settings.repository_url = url
    if username:
        settings.username = username

    if not settings.repository_url:
        console.print("[red]No repository configured. Run 'config set-url' or pass --url.[/red]")
        raise typer.Exit(code=2)

    if settings.username and not settings.password.get_secret_value():
        settings.password = SecretStr(typer.prompt("Password", hide_input=True))

    exit_code = asyncio.run(run_versions(settings, artifacts, newest_first))
    if exit_code:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
