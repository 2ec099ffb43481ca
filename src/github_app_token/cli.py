from pathlib import Path
from typing import NoReturn

import httpx
import typer
from rich.console import Console

from github_app_token.config import get_settings
from github_app_token.errors import TokenExchangeError
from github_app_token.exchanger import TokenExchanger
from github_app_token.github import AppCredentials, GitHubHttpClient

app = typer.Typer(
    name="github-app-token",
    help="Get a GitHub App installation access token for a repository",
    add_completion=False,
)


def make_client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout)


def fail(error: Exception) -> NoReturn:
    typer.echo(f"error occurred: {error}", err=True)
    raise typer.Exit(1)


def check_set(value: str | None, name: str) -> str:
    if not value:
        typer.echo(f"{name} is not set", err=True)
        raise typer.Exit(1)
    return value


@app.command()
def run(
    app_id: str | None = typer.Option(None, "--app", help="AppID on GitHub Apps"),
    pem: str | None = typer.Option(None, "--pem", help="Path to PEM file with the private key"),
    org: str = typer.Option("", "--org", help="Owner or organization name of the repository"),
    repo: str = typer.Option("", "--repo", help="Repository name"),
    api_url: str | None = typer.Option(None, "--api-url", help="GitHub API base URL"),
    timeout: float | None = typer.Option(None, "--timeout", help="HTTP timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print progress to stderr"),
):
    """Print an installation access token to stdout."""
    try:
        settings = get_settings()
    except TokenExchangeError as e:
        fail(e)

    if app_id is None:
        app_id = settings.github_app_id
    if pem is None:
        pem = settings.github_app_private_key_path

    credentials = AppCredentials(
        app_id=check_set(app_id, "app"),
        private_key_path=Path(check_set(pem, "pem")),
        organization=check_set(org, "org"),
        repository=check_set(repo, "repo"),
    )
    console = Console(stderr=True, quiet=not verbose)

    try:
        with make_client(timeout if timeout is not None else settings.request_timeout) as client:
            exchanger = TokenExchanger(
                credentials,
                GitHubHttpClient(client, api_version=settings.github_api_version),
                api_url=api_url or settings.github_api_url,
                console=console,
            )
            token = exchanger.get()
    except TokenExchangeError as e:
        fail(e)

    typer.echo(token)


def main():
    app()


if __name__ == "__main__":
    main()
