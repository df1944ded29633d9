"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class EventStatus(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class EventLocation(Enum):
    """Where a copy of an event is stored."""

    OWNER_SCOPED = "owner_scoped"
    PUBLISHED = "published"


@dataclass(frozen=True)
class BasicDetails:
    """Descriptive fields of an event. Drafts may leave any of them empty."""

    title: str = ""
    description: str = ""
    genres: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    age_limit: str | None = None
    duration_minutes: Decimal | None = None
    terms_accepted: bool = False
    terms_text: str | None = None
    cover_wide_url: str = ""
    cover_portrait_url: str = ""


@dataclass(frozen=True)
class Show:
    id: str
    start_time: str = ""
    end_time: str = ""
    name: str | None = None


@dataclass(frozen=True)
class ScheduleDate:
    id: str
    date: str = ""
    shows: tuple[Show, ...] = ()


@dataclass(frozen=True)
class Venue:
    id: str
    name: str = ""
    address: str = ""
    dates: tuple[ScheduleDate, ...] = ()

    @property
    def has_shows(self) -> bool:
        return any(date.shows for date in self.dates)


@dataclass(frozen=True)
class Location:
    id: str
    name: str = ""
    venues: tuple[Venue, ...] = ()


@dataclass(frozen=True)
class Schedule:
    """Locations → venues → dates → shows, in the order the host entered them."""

    locations: tuple[Location, ...] = ()

    def venue_ids_with_shows(self) -> list[str]:
        return [
            venue.id
            for location in self.locations
            for venue in location.venues
            if venue.has_shows
        ]


@dataclass(frozen=True)
class TicketType:
    id: str
    type_name: str = ""
    price: Decimal | None = None
    total_quantity: Decimal | None = None


@dataclass(frozen=True)
class VenueTicketConfig:
    venue_id: str
    ticket_types: tuple[TicketType, ...] = ()


@dataclass(frozen=True)
class TicketConfig:
    venue_configs: tuple[VenueTicketConfig, ...] = ()

    def for_venue(self, venue_id: str) -> VenueTicketConfig | None:
        """Return the first config for the venue, if any."""
        for config in self.venue_configs:
            if config.venue_id == venue_id:
                return config
        return None


@dataclass(frozen=True)
class EventContent:
    """Everything a host submits for an event."""

    basic_details: BasicDetails = field(default_factory=BasicDetails)
    schedule: Schedule = field(default_factory=Schedule)
    tickets: TicketConfig = field(default_factory=TicketConfig)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event in one storage location."""

    event_id: str
    host_uid: str
    status: EventStatus
    content: EventContent
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        return self.status is EventStatus.PUBLISHED


@dataclass(frozen=True)
class LocatedEvent:
    """An event together with the storage location it was found in."""

    location: EventLocation
    event: Event


@dataclass(frozen=True)
class OwnershipResolution:
    """Whether an event exists and whether the caller may modify it.

    `owned` is only meaningful when `exists` is true.
    """

    exists: bool
    owned: bool
    location: EventLocation | None = None
