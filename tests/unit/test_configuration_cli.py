"""Unit tests for the CLI."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch
from typer.testing import CliRunner

from github_auth_factory.configuration.cli import typer_app
from github_auth_factory.configuration.env import Settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def clear_settings_environment(monkeypatch: MonkeyPatch) -> None:
    """Remove settings variables from the process environment."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)


def _write_env_file(path: Path, values: dict[str, str]) -> Path:
    path.write_text("\n".join(f"{name}={value}" for name, value in values.items()))
    return path


def test_validate_env_succeeds(valid_environ: dict[str, str], tmp_path: Path) -> None:
    """Test that a valid environment exits cleanly."""
    env_file = _write_env_file(tmp_path / ".env", valid_environ)

    result = runner.invoke(typer_app, ["validate-env", "--env-file", str(env_file)])

    assert result.exit_code == 0
    assert "valid for the test environment" in result.stdout
    assert "GitHub App installation access: not configured" in result.stdout


def test_validate_env_reports_github_app(valid_environ: dict[str, str], tmp_path: Path) -> None:
    """Test that configured GitHub App credentials are reported."""
    valid_environ["GITHUB_APP_ID"] = "123"
    valid_environ["GITHUB_APP_PRIVATE_KEY_PATH"] = str(tmp_path / "key.pem")
    env_file = _write_env_file(tmp_path / ".env", valid_environ)

    result = runner.invoke(typer_app, ["validate-env", "--env-file", str(env_file)])

    assert result.exit_code == 0
    assert "GitHub App installation access: configured" in result.stdout


def test_validate_env_fails_on_missing_variable(valid_environ: dict[str, str], tmp_path: Path) -> None:
    """Test that a missing required variable exits with an error."""
    del valid_environ["GITHUB_PUBLIC_API_KEY"]
    env_file = _write_env_file(tmp_path / ".env", valid_environ)

    result = runner.invoke(typer_app, ["validate-env", "--env-file", str(env_file)])

    assert result.exit_code == 1
    assert "GITHUB_PUBLIC_API_KEY" in result.output


def test_validate_env_ignores_unrelated_variables(valid_environ: dict[str, str], tmp_path: Path) -> None:
    """Test that variables outside the schema do not fail validation."""
    valid_environ["SENTRY_DSN"] = "https://key@sentry.example.com/1"
    env_file = _write_env_file(tmp_path / ".env", valid_environ)

    result = runner.invoke(typer_app, ["validate-env", "--env-file", str(env_file)])

    assert result.exit_code == 0
    assert "SENTRY_DSN" not in result.output


def test_validate_env_reads_env_local_by_default(valid_environ: dict[str, str], tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    """Test that .env.local in the working directory is read without options."""
    monkeypatch.chdir(tmp_path)
    _write_env_file(tmp_path / ".env.local", valid_environ)

    result = runner.invoke(typer_app, ["validate-env"])

    assert result.exit_code == 0
    assert "valid for the test environment" in result.stdout


def test_validate_env_later_files_take_precedence(valid_environ: dict[str, str], tmp_path: Path) -> None:
    """Test that repeated env files are read with later files overriding earlier ones."""
    base = _write_env_file(tmp_path / "base.env", valid_environ)
    override = _write_env_file(tmp_path / "override.env", {"APP_ENV": "production"})

    result = runner.invoke(typer_app, ["validate-env", "--env-file", str(base), "--env-file", str(override)])

    assert result.exit_code == 0
    assert "valid for the production environment" in result.stdout
