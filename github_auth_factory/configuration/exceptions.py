"""Contains exceptions raised when validating configuration and authenticating."""


class ConfigurationValidationError(Exception):
    """Raised when the environment does not satisfy the settings schema."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        """Initializes the exception with the offending environment variables."""
        details = "; ".join(f"{error['env_name']}: {error['message']}" for error in errors)
        super().__init__(f"Invalid environment configuration - {details}")
        self.errors = errors

    @property
    def env_names(self) -> list[str]:
        """Names of the environment variables that failed validation."""
        return [error["env_name"] for error in self.errors]


class GitHubAppConfigurationError(Exception):
    """Raised when GitHub App credentials are needed but not configured."""

    pass


class GitHubAuthenticationError(Exception):
    """Raised when a session cannot be authenticated and no fallback exists."""

    pass
