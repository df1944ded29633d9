"""Publish-time validation of a full event document.

validate_event is pure: it never touches a store. It reports every problem
it can find at each level of the document before descending, and returns a
mapping from field path to message. An empty mapping means the event may be
published.

Field paths:
    basicDetails.<field>
    schedule.locations[i].venues[j].dates[k].shows[m].<field>
    tickets.venue[<venueId>].ticketTypes[n].<field>
"""

from decimal import Decimal

from events.domain.models import (
    BasicDetails,
    EventContent,
    Schedule,
    TicketConfig,
    TicketType,
)

TITLE_MAX_LENGTH = 50

ValidationErrors = dict[str, str]


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _validate_basic_details(bd: BasicDetails, errors: ValidationErrors) -> None:
    if _blank(bd.title):
        errors["basicDetails.title"] = "Title is required."
    elif len(bd.title.strip()) > TITLE_MAX_LENGTH:
        errors["basicDetails.title"] = f"Title cannot exceed {TITLE_MAX_LENGTH} characters."

    if _blank(bd.description):
        errors["basicDetails.description"] = "Description is required."

    if not bd.genres:
        errors["basicDetails.genres"] = "Select at least one genre."

    if not bd.languages:
        errors["basicDetails.languages"] = "Select at least one language."

    if _blank(bd.age_limit):
        errors["basicDetails.ageLimit"] = "Age limit is required."

    if bd.duration_minutes is None or bd.duration_minutes <= 0:
        errors["basicDetails.durationMinutes"] = "Duration must be greater than 0."

    if bd.terms_accepted is not True:
        errors["basicDetails.termsAccepted"] = "You must accept the terms and conditions."

    if _blank(bd.cover_wide_url):
        errors["basicDetails.coverWideUrl"] = "Wide cover photo is required."

    if _blank(bd.cover_portrait_url):
        errors["basicDetails.coverPortraitUrl"] = "Portrait cover photo is required."


def _validate_schedule(schedule: Schedule, errors: ValidationErrors) -> bool:
    """Return False when there is nothing scheduled to check tickets against."""
    if not schedule.locations:
        errors["schedule.locations"] = "At least one location is required."
        return False

    for loc_idx, location in enumerate(schedule.locations):
        loc_path = f"schedule.locations[{loc_idx}]"
        if _blank(location.name):
            errors[f"{loc_path}.name"] = "Location name is required."
        if not location.venues:
            errors[f"{loc_path}.venues"] = "At least one venue is required."
            continue

        for venue_idx, venue in enumerate(location.venues):
            venue_path = f"{loc_path}.venues[{venue_idx}]"
            if _blank(venue.name):
                errors[f"{venue_path}.name"] = "Venue name is required."
            if _blank(venue.address):
                errors[f"{venue_path}.address"] = "Venue address is required."
            if not venue.dates:
                errors[f"{venue_path}.dates"] = "At least one date is required."
                continue

            for date_idx, date in enumerate(venue.dates):
                date_path = f"{venue_path}.dates[{date_idx}]"
                if _blank(date.date):
                    errors[f"{date_path}.date"] = "Date is required."
                if not date.shows:
                    errors[f"{date_path}.shows"] = "At least one show is required."
                    continue

                for show_idx, show in enumerate(date.shows):
                    show_path = f"{date_path}.shows[{show_idx}]"
                    if _blank(show.start_time):
                        errors[f"{show_path}.startTime"] = "Start time is required."
                    if _blank(show.end_time):
                        errors[f"{show_path}.endTime"] = "End time is required."
                    elif not _blank(show.start_time) and show.start_time >= show.end_time:
                        errors[f"{show_path}.endTime"] = "End time must be after start time."
    return True


def _positive_integer(value: Decimal | None) -> bool:
    return value is not None and value > 0 and value == value.to_integral_value()


def _validate_ticket_type(ticket: TicketType, path: str, errors: ValidationErrors) -> None:
    if _blank(ticket.type_name):
        errors[f"{path}.typeName"] = "Ticket type name is required."
    if ticket.price is None or ticket.price <= 0:
        errors[f"{path}.price"] = "Price must be greater than 0."
    if not _positive_integer(ticket.total_quantity):
        errors[f"{path}.totalQuantity"] = "Total quantity must be a positive integer."


def _validate_tickets(
    tickets: TicketConfig, schedule: Schedule, errors: ValidationErrors
) -> None:
    # Venues without shows need no ticket configuration.
    for venue_id in schedule.venue_ids_with_shows():
        venue_path = f"tickets.venue[{venue_id}]"
        config = tickets.for_venue(venue_id)
        if config is None or not config.ticket_types:
            errors[venue_path] = "At least one ticket type is required for this venue."
            continue

        for ticket_idx, ticket in enumerate(config.ticket_types):
            _validate_ticket_type(ticket, f"{venue_path}.ticketTypes[{ticket_idx}]", errors)


def validate_event(content: EventContent) -> ValidationErrors:
    """Return every validation error in the event, keyed by field path."""
    errors: ValidationErrors = {}
    _validate_basic_details(content.basic_details, errors)
    if _validate_schedule(content.schedule, errors):
        _validate_tickets(content.tickets, content.schedule, errors)
    return errors
