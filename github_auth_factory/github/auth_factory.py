"""Selects a credential source and builds an authenticated GitHub client."""

import functools
from typing import Awaitable, Callable, Self, TypeAlias

import structlog

from github_auth_factory.accounts.abc import AccessTokenProviderBase, AccountStoreBase
from github_auth_factory.accounts.store import SQLAlchemyAccountStore
from github_auth_factory.accounts.tokens import AccountAccessTokenProvider
from github_auth_factory.configuration.env import Settings
from github_auth_factory.configuration.exceptions import GitHubAuthenticationError
from github_auth_factory.configuration.models import AuthenticationSource, AuthSession
from github_auth_factory.utils.constants import GITHUB_PROVIDER_ID

from .app import get_installation_token
from .client import GitHubClient, get_github_token_client
from .results import ClientResult

logger = structlog.get_logger(__name__)

InstallationTokenIssuer: TypeAlias = Callable[[int], Awaitable[str]]


class GitHubAuthFactory:
    """Builds GitHub clients from whichever credential a session can provide.

    Each strategy is independently callable. The installation and OAuth
    strategies return None when they do not apply or when their lookup fails,
    so callers can chain them and fall back to public access.
    """

    def __init__(
        self,
        settings: Settings,
        account_store: AccountStoreBase,
        access_token_provider: AccessTokenProviderBase,
        installation_token_issuer: InstallationTokenIssuer | None = None,
    ) -> None:
        """Initialize the factory with its settings and collaborators."""
        self.settings = settings
        self.account_store = account_store
        self.access_token_provider = access_token_provider
        self.installation_token_issuer: InstallationTokenIssuer = installation_token_issuer or functools.partial(
            get_installation_token,
            github_app_id=settings.GITHUB_APP_ID,
            github_app_private_key_path=settings.GITHUB_APP_PRIVATE_KEY_PATH,
            github_api_url=settings.GITHUB_API_URL,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Create a factory backed by the configured database."""
        account_store = SQLAlchemyAccountStore.from_settings(settings)
        return cls(settings, account_store, AccountAccessTokenProvider(account_store))

    def _client(self, token: str) -> GitHubClient:
        return get_github_token_client(token, self.settings.GITHUB_API_URL)

    def create_public(self) -> GitHubClient:
        """Create a client using the shared public API key, for anonymous access."""
        logger.info("Using public GitHub API key")
        return self._client(self.settings.GITHUB_PUBLIC_API_KEY)

    async def create_with_app_result(self, session: AuthSession | None) -> ClientResult:
        """Try to create a client from the user's GitHub App installation."""
        source = AuthenticationSource.INSTALLATION
        if session is None or not session.user_id:
            return ClientResult.absent(source)

        try:
            account = await self.account_store.find_account(session.user_id, GITHUB_PROVIDER_ID)
            if account is None or account.installation_id is None:
                return ClientResult.absent(source)
            installation_token = await self.installation_token_issuer(account.installation_id)
            client = self._client(installation_token)
        except Exception as e:
            logger.warning(
                "Failed to create GitHub App client",
                user_id=session.user_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ClientResult.failed(source, e)

        logger.info("Using GitHub App installation for authenticated user", installation_id=account.installation_id, user_id=session.user_id)
        return ClientResult.found(source, client)

    async def create_with_app(self, session: AuthSession | None) -> GitHubClient | None:
        """Create a client from the user's GitHub App installation, or None."""
        return (await self.create_with_app_result(session)).client

    async def create_with_oauth_result(self, session: AuthSession | None) -> ClientResult:
        """Try to create a client from the user's stored OAuth token."""
        source = AuthenticationSource.OAUTH
        if session is None or not session.user_id:
            return ClientResult.absent(source)

        try:
            access_token = await self.access_token_provider.get_access_token(GITHUB_PROVIDER_ID, session.user_id)
            if not access_token:
                return ClientResult.absent(source)
            client = self._client(access_token)
        except Exception as e:
            logger.warning(
                "Failed to get OAuth token",
                user_id=session.user_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ClientResult.failed(source, e)

        logger.info("Using OAuth token for authenticated user", user_id=session.user_id)
        return ClientResult.found(source, client)

    async def create_with_oauth(self, session: AuthSession | None) -> GitHubClient | None:
        """Create a client from the user's stored OAuth token, or None."""
        return (await self.create_with_oauth_result(session)).client

    async def create_authenticated(self, session: AuthSession) -> GitHubClient:
        """Create a client from the access token carried on the session.

        Raises:
            GitHubAuthenticationError: If the session has no access token.
        """
        if not session.access_token:
            raise GitHubAuthenticationError("No access token available")
        return self._client(session.access_token)

    async def create_best_effort(self, session: AuthSession | None) -> GitHubClient:
        """Create a client from the best available credential.

        Tries the GitHub App installation, then the OAuth token, and falls back
        to the public API key.
        """
        for strategy in (self.create_with_app_result, self.create_with_oauth_result):
            result = await strategy(session)
            if result.is_found and result.client is not None:
                return result.client
            logger.debug("Credential source unavailable", source=result.source.value, outcome=result.outcome.value)
        return self.create_public()
