"""Models shared between configuration and the authentication strategies."""

from dataclasses import dataclass
from enum import Enum


class Environment(str, Enum):
    """Enum for deployment environments."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class AuthenticationSource(str, Enum):
    """Enum for the credential sources a GitHub client can be built from."""

    PUBLIC = "public"
    INSTALLATION = "installation"
    OAUTH = "oauth"
    DIRECT = "direct"


@dataclass(frozen=True)
class AuthSession:
    """Read-only view of a session produced by the external auth subsystem."""

    user_id: str | None = None
    access_token: str | None = None


@dataclass(frozen=True)
class AccountRecord:
    """A linked provider account belonging to a user."""

    user_id: str
    provider_id: str
    installation_id: int | None = None
    access_token: str | None = None
