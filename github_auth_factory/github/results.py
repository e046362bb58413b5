"""Contains results of credential selection strategies."""

from enum import Enum
from typing import Self

from github_auth_factory.configuration.models import AuthenticationSource
from github_auth_factory.github.client import GitHubClient


class StrategyOutcome(str, Enum):
    """Enum for the outcome of a single credential selection strategy."""

    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


class ClientResult:
    """Contains the result of attempting to build a client from one credential source.

    `ABSENT` means the source does not apply to the session. `FAILED` means a
    lookup or token exchange raised unexpectedly; callers that only care about
    falling back can treat both the same way.
    """

    def __init__(
        self,
        source: AuthenticationSource,
        outcome: StrategyOutcome,
        client: GitHubClient | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize the result with its source, outcome, and client or error."""
        self.source = source
        self.outcome = outcome
        self.client = client
        self.error = error

    @classmethod
    def found(cls, source: AuthenticationSource, client: GitHubClient) -> Self:
        """Build a result carrying a usable client."""
        return cls(source, StrategyOutcome.FOUND, client=client)

    @classmethod
    def absent(cls, source: AuthenticationSource) -> Self:
        """Build a result for a source that does not apply."""
        return cls(source, StrategyOutcome.ABSENT)

    @classmethod
    def failed(cls, source: AuthenticationSource, error: Exception) -> Self:
        """Build a result for a source whose lookup failed unexpectedly."""
        return cls(source, StrategyOutcome.FAILED, error=error)

    @property
    def is_found(self) -> bool:
        """Whether the result carries a usable client."""
        return self.outcome == StrategyOutcome.FOUND
