"""User store for HTTP Basic authentication.

The API only needs "who is this and which roles do they hold". Anything that
implements UserStoreProtocol can back get_current_user; the default is a
fixed in-memory table of demo accounts.

MVP NOTE: Demo passwords are hashed on first lookup, not stored in plain
text after that. For production, back the protocol with a users table.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Protocol

import bcrypt

CARD_OWNER_ROLE = "CARD-OWNER"
NON_OWNER_ROLE = "NON-OWNER"


def hash_password(plain: str) -> str:
    """bcrypt-hash a plain-text password, returned as a utf-8 string."""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))


@dataclass(frozen=True)
class UserAccount:
    username: str
    password_hash: str
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        return role in self.roles


class UserStoreProtocol(Protocol):
    def find_by_username(self, username: str) -> UserAccount | None: ...


class InMemoryUserStore:
    """Read-only username -> UserAccount table."""

    def __init__(self, accounts: list[UserAccount]) -> None:
        self._accounts = {a.username: a for a in accounts}

    def find_by_username(self, username: str) -> UserAccount | None:
        return self._accounts.get(username)


def authenticate(store: UserStoreProtocol, username: str, password: str) -> UserAccount | None:
    """Return the account for valid credentials, else None.

    "Unknown user" and "wrong password" both return None so callers cannot
    tell them apart.
    """
    account = store.find_by_username(username)
    if account is None:
        # unknown usernames still pay for one bcrypt check
        verify_password(password, _dummy_hash())
        return None
    if not verify_password(password, account.password_hash):
        return None
    return account


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


# (username, plain password, roles)
_DEMO_USERS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("sarah1", "abc123", (CARD_OWNER_ROLE,)),
    ("hank-owns-no-cards", "qrs456", (NON_OWNER_ROLE,)),
    ("kumar2", "xyz789", (CARD_OWNER_ROLE,)),
)


@lru_cache(maxsize=1)
def get_user_store() -> UserStoreProtocol:
    """FastAPI dependency: the process-wide demo user store."""
    return InMemoryUserStore(
        [
            UserAccount(
                username=username,
                password_hash=hash_password(password),
                roles=frozenset(roles),
            )
            for username, password, roles in _DEMO_USERS
        ]
    )
