"""Utility modules for shared functionality."""

from .constants import DEFAULT_GITHUB_API_URL, GITHUB_PROVIDER_ID

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "GITHUB_PROVIDER_ID",
]
