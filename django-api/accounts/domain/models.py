"""Domain models for host sessions and identity verification.

These are pure domain objects. Django ORM models are in accounts/models.py.
"""

import hashlib
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


def hash_session_key(raw_key: str) -> str:
    """Return the hex sha256 digest stored in place of a raw session key."""
    return hashlib.sha256(raw_key.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class Session:
    """A persisted host session. Only the key hash is ever stored."""

    session_id: str
    owner_id: str
    key_hash: str
    created_at: datetime
    user_agent: str | None = None
    source_ip: str | None = None


@dataclass(frozen=True)
class IssuedSession:
    """Result of a login. `raw_key` is shown to the client exactly once."""

    session_id: str
    raw_key: str
    owner_id: str

    def __repr__(self) -> str:
        return f"IssuedSession(session_id={self.session_id!r}, owner_id={self.owner_id!r})"


@dataclass(frozen=True)
class HostCredentials:
    """Credentials presented on a request, in either supported form."""

    id_token: str | None = None
    session_id: str | None = None
    session_key: str | None = None

    @property
    def has_token(self) -> bool:
        return bool(self.id_token)

    @property
    def has_session_pair(self) -> bool:
        return bool(self.session_id) and bool(self.session_key)

    def is_empty(self) -> bool:
        return not (self.has_token or self.has_session_pair)

    def __repr__(self) -> str:
        return f"HostCredentials(session_id={self.session_id!r})"


class AuthMethod(Enum):
    ID_TOKEN = "id_token"
    SESSION_KEY = "session_key"


@dataclass(frozen=True)
class AuthenticatedHost:
    """The resolved caller, attached to DRF requests as `request.user`."""

    uid: str
    method: AuthMethod
    session_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return True


class KycStatus(Enum):
    NONE = "none"
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


@dataclass(frozen=True)
class KycRecord:
    """Identity-verification record for one host."""

    owner_id: str
    status: KycStatus
    submitted_at: datetime | None = None
    verified_at: datetime | None = None
    rejection_reason: str | None = None


@dataclass(frozen=True)
class HostAccount:
    """Platform account of an identity. Customers can never host."""

    owner_id: str
    name: str
    phone: str | None = None
    is_host: bool = False
    is_customer: bool = False
    created_at: datetime | None = None

    @property
    def can_host(self) -> bool:
        return self.is_host and not self.is_customer
