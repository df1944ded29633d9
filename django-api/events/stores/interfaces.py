"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventLocation, LocatedEvent


class EventStore(ABC):
    """Interface for event persistence across both storage locations."""

    @abstractmethod
    def get_owned(self, owner_id: str, event_id: str) -> Event | None:
        """Return the owner's copy of an event, or None if not found."""
        ...

    @abstractmethod
    def get_published(self, event_id: str) -> Event | None:
        """Return the global published copy of an event, or None if not found."""
        ...

    @abstractmethod
    def save_owned(self, event: Event) -> None:
        """Create or replace the owner's copy. Never touches the published copy."""
        ...

    @abstractmethod
    def commit_publication(self, event: Event) -> None:
        """Write the same event to both locations, all or nothing."""
        ...

    def locate(self, owner_id: str, event_id: str) -> LocatedEvent | None:
        """Find an event, preferring the caller's own copy over the global one."""
        owned = self.get_owned(owner_id, event_id)
        if owned is not None:
            return LocatedEvent(location=EventLocation.OWNER_SCOPED, event=owned)

        published = self.get_published(event_id)
        if published is not None:
            return LocatedEvent(location=EventLocation.PUBLISHED, event=published)

        return None
