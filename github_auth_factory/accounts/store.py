"""SQLAlchemy-backed account lookups."""

import asyncio
from typing import Self

import structlog
from sqlalchemy import Engine, create_engine, text

from github_auth_factory.accounts.abc import AccountStoreBase
from github_auth_factory.configuration.env import Settings
from github_auth_factory.configuration.models import AccountRecord

logger = structlog.get_logger(__name__)

FIND_ACCOUNT_QUERY = text(
    """
    SELECT user_id, provider_id, installation_id, access_token
    FROM account
    WHERE user_id = :user_id AND provider_id = :provider_id
    LIMIT 1
    """
)


class SQLAlchemyAccountStore(AccountStoreBase):
    """Reads linked provider accounts from the relational store.

    The store never writes. Each lookup checks a connection out of the
    engine's pool for the duration of a single query.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the store with an already-configured engine."""
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Create a store connected to the configured database."""
        return cls(create_engine(settings.DATABASE_URL, pool_pre_ping=True))

    async def find_account(self, user_id: str, provider_id: str) -> AccountRecord | None:
        """Find the account linking a user to a provider, if any."""
        return await asyncio.to_thread(self._find_account, user_id, provider_id)

    def _find_account(self, user_id: str, provider_id: str) -> AccountRecord | None:
        with self.engine.connect() as conn:
            row = conn.execute(FIND_ACCOUNT_QUERY, {"user_id": user_id, "provider_id": provider_id}).mappings().first()

        if row is None:
            logger.debug("No account found", user_id=user_id, provider_id=provider_id)
            return None

        installation_id = row["installation_id"]
        return AccountRecord(
            user_id=row["user_id"],
            provider_id=row["provider_id"],
            installation_id=int(installation_id) if installation_id is not None else None,
            access_token=row["access_token"],
        )
