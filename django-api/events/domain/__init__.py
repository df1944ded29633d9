from events.domain.models import (
    BasicDetails,
    Event,
    EventContent,
    EventLocation,
    EventStatus,
    LocatedEvent,
    Location,
    OwnershipResolution,
    Schedule,
    ScheduleDate,
    Show,
    TicketConfig,
    TicketType,
    Venue,
    VenueTicketConfig,
)
from events.domain.value_objects import EventId

__all__ = [
    "BasicDetails",
    "Event",
    "EventContent",
    "EventId",
    "EventLocation",
    "EventStatus",
    "LocatedEvent",
    "Location",
    "OwnershipResolution",
    "Schedule",
    "ScheduleDate",
    "Show",
    "TicketConfig",
    "TicketType",
    "Venue",
    "VenueTicketConfig",
]
