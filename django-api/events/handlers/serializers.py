"""Serializers for event submission requests and event responses.

Input serializers only check the shape of a payload. Whether an event is
complete enough to publish is decided by domain/validation.py, so every
field here is optional and blank values are accepted. Field names follow
the camelCase document format, so validated data can be handed straight to
domain/documents.py.
"""

from rest_framework import serializers

from events.domain import EventContent
from events.domain.documents import (
    basic_details_to_document,
    content_from_documents,
    schedule_to_document,
    tickets_to_document,
)
from events.services.publication_service import SubmissionMode


def _text() -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )


class NumberField(serializers.DecimalField):
    """Any finite number. Range and integrality are checked at publish time."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(max_digits=None, decimal_places=None, **kwargs)


class AgeLimitField(serializers.Field):
    """Age limits arrive either as a number or as a label such as "18+"."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (str, int, float)):
            raise serializers.ValidationError("Age limit must be a string or number.")
        if isinstance(data, float) and data.is_integer():
            data = int(data)
        return str(data)

    def to_representation(self, value):
        return value


class BasicDetailsSerializer(serializers.Serializer):
    title = _text()
    description = _text()
    genres = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    languages = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True
    )
    ageLimit = AgeLimitField(required=False, allow_null=True)
    durationMinutes = NumberField()
    termsAccepted = serializers.BooleanField(required=False, allow_null=True)
    termsText = _text()
    coverWideUrl = _text()
    coverPortraitUrl = _text()


class ShowSerializer(serializers.Serializer):
    id = _text()
    name = _text()
    startTime = _text()
    endTime = _text()


class ScheduleDateSerializer(serializers.Serializer):
    id = _text()
    date = _text()
    shows = ShowSerializer(many=True, required=False)


class VenueSerializer(serializers.Serializer):
    id = _text()
    name = _text()
    address = _text()
    dates = ScheduleDateSerializer(many=True, required=False)


class LocationSerializer(serializers.Serializer):
    id = _text()
    name = _text()
    venues = VenueSerializer(many=True, required=False)


class ScheduleSerializer(serializers.Serializer):
    locations = LocationSerializer(many=True, required=False)


class TicketTypeSerializer(serializers.Serializer):
    id = _text()
    typeName = _text()
    price = NumberField()
    totalQuantity = NumberField()


class VenueTicketConfigSerializer(serializers.Serializer):
    venueId = _text()
    ticketTypes = TicketTypeSerializer(many=True, required=False)


class TicketConfigSerializer(serializers.Serializer):
    venueConfigs = VenueTicketConfigSerializer(many=True, required=False)


class EventUpsertSerializer(serializers.Serializer):
    """Request body for POST /api/events."""

    mode = serializers.ChoiceField(
        choices=[mode.value for mode in SubmissionMode],
        error_messages={"invalid_choice": "Mode must be either 'draft' or 'publish'."},
    )
    eventId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    basicDetails = BasicDetailsSerializer(required=False, allow_null=True)
    schedule = ScheduleSerializer(required=False, allow_null=True)
    tickets = TicketConfigSerializer(required=False, allow_null=True)

    def to_content(self) -> EventContent:
        data = self.validated_data
        return content_from_documents(
            data.get("basicDetails"), data.get("schedule"), data.get("tickets")
        )


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    eventId = serializers.CharField(source="event_id")
    status = serializers.CharField(source="status.value")
    basicDetails = serializers.SerializerMethodField()
    schedule = serializers.SerializerMethodField()
    tickets = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    publishedAt = serializers.DateTimeField(source="published_at", allow_null=True)

    def get_basicDetails(self, event):
        return basic_details_to_document(event.content.basic_details)

    def get_schedule(self, event):
        return schedule_to_document(event.content.schedule)

    def get_tickets(self, event):
        return tickets_to_document(event.content.tickets)
