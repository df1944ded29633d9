"""Conversion between domain event content and stored JSON documents.

Documents use the same camelCase keys as the API. Numbers are stored as
JSON integers when integral and as decimal strings otherwise, so prices
round-trip without float error.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from events.domain.models import (
    BasicDetails,
    EventContent,
    Location,
    Schedule,
    ScheduleDate,
    Show,
    TicketConfig,
    TicketType,
    Venue,
    VenueTicketConfig,
)


def _number_to_document(value: Decimal | None) -> int | str | None:
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return str(value)


def _number_from_document(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def basic_details_to_document(bd: BasicDetails) -> dict[str, Any]:
    return {
        "title": bd.title,
        "description": bd.description,
        "genres": list(bd.genres),
        "languages": list(bd.languages),
        "ageLimit": bd.age_limit,
        "durationMinutes": _number_to_document(bd.duration_minutes),
        "termsAccepted": bd.terms_accepted,
        "termsText": bd.terms_text,
        "coverWideUrl": bd.cover_wide_url,
        "coverPortraitUrl": bd.cover_portrait_url,
    }


def basic_details_from_document(doc: dict[str, Any]) -> BasicDetails:
    age_limit = doc.get("ageLimit")
    return BasicDetails(
        title=doc.get("title") or "",
        description=doc.get("description") or "",
        genres=tuple(doc.get("genres") or ()),
        languages=tuple(doc.get("languages") or ()),
        age_limit=str(age_limit) if age_limit is not None else None,
        duration_minutes=_number_from_document(doc.get("durationMinutes")),
        terms_accepted=bool(doc.get("termsAccepted")),
        terms_text=doc.get("termsText"),
        cover_wide_url=doc.get("coverWideUrl") or "",
        cover_portrait_url=doc.get("coverPortraitUrl") or "",
    )


def schedule_to_document(schedule: Schedule) -> dict[str, Any]:
    return {
        "locations": [
            {
                "id": location.id,
                "name": location.name,
                "venues": [
                    {
                        "id": venue.id,
                        "name": venue.name,
                        "address": venue.address,
                        "dates": [
                            {
                                "id": date.id,
                                "date": date.date,
                                "shows": [
                                    {
                                        "id": show.id,
                                        "name": show.name,
                                        "startTime": show.start_time,
                                        "endTime": show.end_time,
                                    }
                                    for show in date.shows
                                ],
                            }
                            for date in venue.dates
                        ],
                    }
                    for venue in location.venues
                ],
            }
            for location in schedule.locations
        ]
    }


def schedule_from_document(doc: dict[str, Any]) -> Schedule:
    return Schedule(
        locations=tuple(
            Location(
                id=loc.get("id") or "",
                name=loc.get("name") or "",
                venues=tuple(
                    Venue(
                        id=venue.get("id") or "",
                        name=venue.get("name") or "",
                        address=venue.get("address") or "",
                        dates=tuple(
                            ScheduleDate(
                                id=date.get("id") or "",
                                date=date.get("date") or "",
                                shows=tuple(
                                    Show(
                                        id=show.get("id") or "",
                                        name=show.get("name"),
                                        start_time=show.get("startTime") or "",
                                        end_time=show.get("endTime") or "",
                                    )
                                    for show in date.get("shows") or ()
                                ),
                            )
                            for date in venue.get("dates") or ()
                        ),
                    )
                    for venue in loc.get("venues") or ()
                ),
            )
            for loc in doc.get("locations") or ()
        )
    )


def tickets_to_document(tickets: TicketConfig) -> dict[str, Any]:
    return {
        "venueConfigs": [
            {
                "venueId": config.venue_id,
                "ticketTypes": [
                    {
                        "id": ticket.id,
                        "typeName": ticket.type_name,
                        "price": _number_to_document(ticket.price),
                        "totalQuantity": _number_to_document(ticket.total_quantity),
                    }
                    for ticket in config.ticket_types
                ],
            }
            for config in tickets.venue_configs
        ]
    }


def tickets_from_document(doc: dict[str, Any]) -> TicketConfig:
    return TicketConfig(
        venue_configs=tuple(
            VenueTicketConfig(
                venue_id=config.get("venueId") or "",
                ticket_types=tuple(
                    TicketType(
                        id=ticket.get("id") or "",
                        type_name=ticket.get("typeName") or "",
                        price=_number_from_document(ticket.get("price")),
                        total_quantity=_number_from_document(ticket.get("totalQuantity")),
                    )
                    for ticket in config.get("ticketTypes") or ()
                ),
            )
            for config in doc.get("venueConfigs") or ()
        )
    )


def content_to_documents(content: EventContent) -> dict[str, dict[str, Any]]:
    """Return the three stored documents keyed by model field name."""
    return {
        "basic_details": basic_details_to_document(content.basic_details),
        "schedule": schedule_to_document(content.schedule),
        "tickets": tickets_to_document(content.tickets),
    }


def content_from_documents(
    basic_details: dict[str, Any] | None,
    schedule: dict[str, Any] | None,
    tickets: dict[str, Any] | None,
) -> EventContent:
    return EventContent(
        basic_details=basic_details_from_document(basic_details or {}),
        schedule=schedule_from_document(schedule or {}),
        tickets=tickets_from_document(tickets or {}),
    )
