import asyncio
import logging
from typing import List, Optional, Sequence

from packaging.version import InvalidVersion, Version
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..domain.errors import InvalidIdentifierError, MavenError
from ..domain.models import ArtifactIdentifier, ResolvedArtifact
from ..registry.client import ArtifactRepository

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def order_versions(versions: Sequence[str], newest_first: bool = False) -> List[str]:
    """
    order versions for display.

    publication order is kept unless `newest_first` is set. versions that are
    not PEP 440 compatible keep their publication order after the sorted ones.
    """
    if not newest_first:
        return list(versions)

    comparable = []
    others = []
    for v in versions:
        try:
            comparable.append((Version(v), v))
        except InvalidVersion:
            others.append(v)
    comparable.sort(key=lambda pair: pair[0], reverse=True)
    return [v for _, v in comparable] + others


class VersionsService:
    """resolves artifacts and displays their published versions."""

    def __init__(self, repository: ArtifactRepository, console: Optional[Console] = None):
        self.repository = repository
        self.console = console or Console()

    async def show_versions(self, artifacts: Sequence[str], newest_first: bool = False) -> int:
        """
        resolve and display each artifact.

        args:
            artifacts: identifiers in `<group>:<name>` form
            newest_first: sort versions descending instead of publication order

        returns:
            exit code: 0 if all were found, 1 if any is missing, 2 if any failed
        """
        exit_code = EXIT_OK
        identifiers: List[ArtifactIdentifier] = []
        for artifact in artifacts:
            try:
                identifiers.append(ArtifactIdentifier.parse(artifact))
            except InvalidIdentifierError as e:
                self.console.print(f"[red]Error:[/red] {escape(str(e))}")
                exit_code = EXIT_ERROR

        results = await asyncio.gather(
            *(self.repository.resolve(i) for i in identifiers),
            return_exceptions=True,
        )

        for identifier, result in zip(identifiers, results):
            if isinstance(result, MavenError):
                logger.debug(f"resolution of {identifier} failed: {result!r}")
                self.console.print(f"[red]Error resolving {escape(str(identifier))}:[/red] {escape(str(result))}")
                exit_code = EXIT_ERROR
            elif isinstance(result, BaseException):
                raise result
            elif result is None:
                self.console.print(f"[yellow]Artifact '{identifier}' not found in repository.[/yellow]")
                exit_code = max(exit_code, EXIT_NOT_FOUND)
            else:
                self.render(result, newest_first)

        return exit_code

    def render(self, artifact: ResolvedArtifact, newest_first: bool = False):
        grid = Table.grid(expand=True)
        grid.add_column(style="bold cyan", justify="right")
        grid.add_column(style="white")

        grid.add_row("Group:", artifact.group)
        grid.add_row("Name:", artifact.name)
        if artifact.latest:
            grid.add_row("Latest:", artifact.latest)
        if artifact.release:
            grid.add_row("Release:", artifact.release)

        versions = order_versions(artifact.versions, newest_first)
        grid.add_row("Versions:", ", ".join(versions) if versions else "None")

        self.console.print(Panel(grid, title=f"📦 {artifact.identifier}", border_style="cyan"))
