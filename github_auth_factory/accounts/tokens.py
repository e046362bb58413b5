"""Access token provider backed by stored account records."""

from github_auth_factory.accounts.abc import AccessTokenProviderBase, AccountStoreBase


class AccountAccessTokenProvider(AccessTokenProviderBase):
    """Returns the OAuth access token saved on the user's linked account."""

    def __init__(self, account_store: AccountStoreBase) -> None:
        """Initialize the provider with the store holding linked accounts."""
        self.account_store = account_store

    async def get_access_token(self, provider_id: str, user_id: str) -> str | None:
        """Get the stored access token for a user and provider, if any."""
        account = await self.account_store.find_account(user_id, provider_id)
        if account is None or not account.access_token:
            return None
        return account.access_token
