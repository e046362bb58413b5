# This file is intended to hold the setup for single-credential githubkit clients.

"""Sets up githubkit clients authenticated with a single bearer credential."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

from github_auth_factory.utils.constants import DEFAULT_GITHUB_API_URL

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


def get_github_token_client(token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> GitHubClient:
    """Returns a GitHub client authenticated with the given token."""
    if not token:
        raise ValueError("A non-empty token is required to construct a GitHub client.")
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(token), base_url=github_api_url, http_cache=False)
