"""test suite for the command line interface."""
import pytest
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mvnresolve.cli import main as cli_main
from mvnresolve.config import Settings, load_settings
from mvnresolve.registry.http import build_async_client

EXAMPLE_METADATA = (Path(__file__).parent / "resources" / "example_metadata.xml").read_bytes()


def handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/maven/de/kinch/my-artifact/maven-metadata.xml":
        return httpx.Response(200, content=EXAMPLE_METADATA)
    if request.url.path.startswith("/maven/locked/"):
        return httpx.Response(401)
    return httpx.Response(404)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_repository(monkeypatch):
    """route the cli's http client to an in-memory repository."""
    requests = []

    def recording_handler(request):
        requests.append(request)
        return handler(request)

    def fake_build(settings=None):
        return httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))

    monkeypatch.setattr(cli_main, "build_async_client", fake_build)
    monkeypatch.setattr(cli_main, "load_settings", lambda: Settings(username="", password=""))
    return requests


class TestBuildAsyncClient:
    def test_defaults(self):
        client = build_async_client()
        assert client.headers["User-Agent"] == Settings().user_agent
        assert client.timeout.read == 30.0
        assert client.follow_redirects

    def test_settings(self):
        client = build_async_client(Settings(timeout=3, user_agent="ci/1.0"))
        assert client.timeout.connect == 3.0
        assert client.headers["User-Agent"] == "ci/1.0"


class TestVersionsCommand:
    def test_found(self, runner, fake_repository):
        result = runner.invoke(
            cli_main.app, ["versions", "de.kinch:my-artifact", "--url", "http://repo.test/maven/"]
        )
        assert result.exit_code == 0
        assert "2.0.0, 2.1.0, 2.2.0" in result.output
        assert len(fake_repository) == 1

    def test_not_found(self, runner, fake_repository):
        result = runner.invoke(
            cli_main.app, ["versions", "de.kinch:missing", "--url", "http://repo.test/maven/"]
        )
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unauthorized(self, runner, fake_repository):
        result = runner.invoke(
            cli_main.app, ["versions", "locked:thing", "--url", "http://repo.test/maven/"]
        )
        assert result.exit_code == 2

    def test_no_repository_configured(self, runner, fake_repository):
        result = runner.invoke(cli_main.app, ["versions", "de.kinch:my-artifact"])
        assert result.exit_code == 2
        assert "No repository configured" in result.output
        assert fake_repository == []


    def test_invalid_timeout_in_config(self, runner, fake_repository, monkeypatch, tmp_path):
        config_file = tmp_path / "config"
        config_file.write_text("MVNRESOLVE_TIMEOUT=0\n")
        monkeypatch.delenv("MVNRESOLVE_TIMEOUT", raising=False)
        monkeypatch.setattr(cli_main, "load_settings", lambda: load_settings(config_file))

        result = runner.invoke(
            cli_main.app, ["versions", "de.kinch:my-artifact", "--url", "http://repo.test/maven/"]
        )
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, ValidationError)
        assert fake_repository == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
