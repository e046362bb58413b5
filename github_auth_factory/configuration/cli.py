"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import typer
from typer import Option
from typing_extensions import Annotated

from github_auth_factory.configuration.env import DEFAULT_ENV_FILES, load_settings
from github_auth_factory.configuration.exceptions import ConfigurationValidationError

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main() -> None:
    """Configuration tooling for the GitHub authentication factory."""


@typer_app.command(name="validate-env")
def validate_env_cli(
    env_file: Annotated[
        list[Path] | None,
        Option(help="Env file to read in addition to the process environment. Repeat to read several; later files take precedence."),
    ] = None,
) -> None:
    """Validate the environment configuration and exit non-zero if it is invalid."""
    try:
        settings = load_settings(env_file=env_file or DEFAULT_ENV_FILES)
    except ConfigurationValidationError as e:
        typer.echo("Environment configuration is invalid:", err=True)
        for error in e.errors:
            typer.echo(f"  - {error['env_name']}: {error['message']}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Environment configuration is valid for the {settings.APP_ENV.value} environment")
    typer.echo(f"GitHub API URL: {settings.GITHUB_API_URL}")
    if settings.GITHUB_APP_ID and settings.GITHUB_APP_PRIVATE_KEY_PATH:
        typer.echo("GitHub App installation access: configured")
    else:
        typer.echo("GitHub App installation access: not configured")


if __name__ == "__main__":
    typer_app()
