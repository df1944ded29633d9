"""Event ownership resolution."""

from events.domain import EventLocation, OwnershipResolution
from events.stores.interfaces import EventStore


class EventOwnershipResolver:
    """Decides whether a caller may modify an event."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def resolve(self, caller_id: str, event_id: str) -> OwnershipResolution:
        """Return whether the event exists and whether the caller owns it.

        A copy in the caller's own location is owned by definition. A global
        published copy is owned only if its host_uid matches the caller.
        """
        located = self._store.locate(caller_id, event_id)
        if located is None:
            return OwnershipResolution(exists=False, owned=False)

        if located.location is EventLocation.OWNER_SCOPED:
            owned = True
        else:
            owned = located.event.host_uid == caller_id
        return OwnershipResolution(exists=True, owned=owned, location=located.location)
