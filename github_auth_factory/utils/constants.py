"""Shared constants used across the application."""

GITHUB_PROVIDER_ID = "github"
"""Provider id under which linked GitHub accounts are stored."""

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL."""
