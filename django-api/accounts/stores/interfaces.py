"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from accounts.domain import HostAccount, KycRecord, Session


class SessionStore(ABC):
    """Interface for host session persistence operations."""

    @abstractmethod
    def add(self, session: Session) -> None:
        """Persist a new session."""
        ...

    @abstractmethod
    def get(self, session_id: str) -> Session | None:
        """Return a session by its globally unique id, or None if not found."""
        ...

    @abstractmethod
    def has_sessions(self, owner_id: str) -> bool:
        """Check if the owner holds at least one session."""
        ...

    @abstractmethod
    def list_for_owner(self, owner_id: str) -> list[Session]:
        """Return the owner's sessions ordered by created_at descending."""
        ...

    @abstractmethod
    def delete(self, owner_id: str, session_id: str) -> int:
        """Delete one of the owner's sessions. Return the number removed."""
        ...

    @abstractmethod
    def delete_all(self, owner_id: str) -> int:
        """Delete every session of the owner in one step. Return the number removed."""
        ...


class KycStore(ABC):
    """Interface for reading identity-verification records."""

    @abstractmethod
    def get_record(self, owner_id: str) -> KycRecord | None:
        """Return the owner's KYC record, or None if none was ever created."""
        ...


class HostAccountStore(ABC):
    """Interface for platform account persistence."""

    @abstractmethod
    def get(self, owner_id: str) -> HostAccount | None:
        """Return the account for an identity, or None if none exists."""
        ...

    @abstractmethod
    def save(self, account: HostAccount) -> None:
        """Create or replace the account."""
        ...
