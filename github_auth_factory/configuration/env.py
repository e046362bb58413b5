"""Pydantic Settings model for application configuration."""

from pathlib import Path
from typing import Annotated, Any, Mapping, Sequence

import structlog
from pydantic import AfterValidator, AnyUrl, StringConstraints, TypeAdapter, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_auth_factory.configuration.exceptions import ConfigurationValidationError
from github_auth_factory.configuration.models import Environment

logger = structlog.get_logger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)

DEFAULT_ENV_FILES = (".env", ".env.local")
"""Env files read in order; later files take precedence."""


def _validate_url(value: str) -> str:
    """Check that a value parses as an absolute URL, returning it unchanged."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be a well-formed URL") from exc
    return value


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
UrlStr = Annotated[str, AfterValidator(_validate_url)]


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILES,
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # Database
    DATABASE_URL: UrlStr

    # GitHub OAuth settings
    GITHUB_CLIENT_ID: NonEmptyStr
    GITHUB_CLIENT_SECRET: NonEmptyStr

    # GitHub API settings
    GITHUB_PUBLIC_API_KEY: NonEmptyStr
    GITHUB_API_URL: UrlStr = "https://api.github.com"

    # GitHub App settings
    GITHUB_APP_ID: str | None = None
    GITHUB_APP_PRIVATE_KEY_PATH: Path | None = None

    # Auth settings
    BETTER_AUTH_SECRET: NonEmptyStr
    AUTH_URL: UrlStr | None = None

    # Generic application-wide settings
    APP_ENV: Environment = Environment.DEVELOPMENT
    PUBLIC_APP_URL: UrlStr


def _to_configuration_error(exc: ValidationError) -> ConfigurationValidationError:
    errors: list[dict[str, str]] = []
    for error in exc.errors():
        env_name = ".".join(str(part) for part in error["loc"]) or "<environment>"
        errors.append({"env_name": env_name, "message": error["msg"]})
    return ConfigurationValidationError(errors)


def load_settings(
    environ: Mapping[str, str] | None = None, env_file: str | Path | Sequence[str | Path] | None = DEFAULT_ENV_FILES
) -> Settings:
    """Validate the environment and build the application settings.

    Intended to be called once at process start, with the result passed to
    whatever needs it.

    Args:
        environ: Mapping of environment variable names to values. When given,
            only this mapping is validated; unknown keys are ignored and
            neither the process environment nor the env file is read.
        env_file: Env file, or files in order of increasing precedence,
            consulted when reading the process environment. Pass None to skip
            them. Variables outside the schema are ignored.

    Raises:
        ConfigurationValidationError: If a required variable is missing or
            any variable is malformed.

    Returns:
        Settings: The validated, immutable settings.
    """
    try:
        if environ is not None:
            values: dict[str, Any] = {name: value for name, value in environ.items() if name in Settings.model_fields}
            settings = Settings.model_validate(values)
        else:
            settings = Settings(_env_file=tuple(env_file) if isinstance(env_file, (list, tuple)) else env_file)  # type: ignore[call-arg]
    except ValidationError as exc:
        error = _to_configuration_error(exc)
        logger.error("Environment configuration is invalid", invalid_variables=error.env_names)
        raise error from exc

    logger.info("Loaded environment configuration", environment=settings.APP_ENV.value)
    return settings
