"""Issues installation access tokens for the GitHub App."""

from pathlib import Path

import structlog
from githubkit import GitHub
from githubkit.auth import AppAuthStrategy

from github_auth_factory.configuration.exceptions import GitHubAppConfigurationError
from github_auth_factory.utils.constants import DEFAULT_GITHUB_API_URL

logger = structlog.get_logger(__name__)


async def get_installation_token(
    installation_id: int,
    github_app_id: str | None,
    github_app_private_key_path: Path | None,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
) -> str:
    """Exchange a GitHub App installation id for a short-lived installation token.

    Args:
        installation_id: The installation to issue a token for.
        github_app_id: The GitHub App ID.
        github_app_private_key_path: Path to the GitHub App private key.
        github_api_url: Base URL of the GitHub REST API.

    Raises:
        GitHubAppConfigurationError: If the GitHub App ID or private key path is unset.

    Returns:
        str: The installation access token.
    """
    if not (github_app_id and github_app_private_key_path):
        raise GitHubAppConfigurationError(
            "GitHub App installation tokens require GITHUB_APP_ID and GITHUB_APP_PRIVATE_KEY_PATH to be set."
        )
    with open(github_app_private_key_path) as f:
        private_key = f.read()

    app_client = GitHub(
        auth=AppAuthStrategy(app_id=github_app_id, private_key=private_key),
        base_url=github_api_url,
        http_cache=False,
    )
    resp = await app_client.rest.apps.async_create_installation_access_token(installation_id)
    logger.debug("Issued GitHub App installation token", installation_id=installation_id, expires_at=str(resp.parsed_data.expires_at))
    return resp.parsed_data.token
