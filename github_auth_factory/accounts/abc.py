"""Base ABCs for the account and session collaborators."""

from abc import ABC, abstractmethod

from github_auth_factory.configuration.models import AccountRecord


class AccountStoreBase(ABC):
    """Base ABC for looking up linked provider accounts."""

    @abstractmethod
    async def find_account(self, user_id: str, provider_id: str) -> AccountRecord | None:
        """Find the account linking a user to a provider, if any."""
        pass


class AccessTokenProviderBase(ABC):
    """Base ABC for retrieving a user's stored OAuth access token."""

    @abstractmethod
    async def get_access_token(self, provider_id: str, user_id: str) -> str | None:
        """Get the stored access token for a user and provider, if any."""
        pass
