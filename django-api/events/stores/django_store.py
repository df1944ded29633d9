"""Django ORM implementation of the EventStore."""

from django.db import transaction

from accounts.stores.django_store import translate_store_errors
from events import models
from events.domain import Event, EventStatus
from events.domain.documents import content_from_documents, content_to_documents
from events.stores.interfaces import EventStore


def _to_event(row: models.EventDocument) -> Event:
    return Event(
        event_id=row.event_id,
        host_uid=row.host_uid,
        status=EventStatus(row.status),
        content=content_from_documents(row.basic_details, row.schedule, row.tickets),
        created_at=row.created_at,
        updated_at=row.updated_at,
        published_at=row.published_at,
    )


def _row_fields(event: Event) -> dict:
    return {
        "status": event.status.value,
        "created_at": event.created_at,
        "updated_at": event.updated_at,
        "published_at": event.published_at,
        **content_to_documents(event.content),
    }


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    @translate_store_errors
    def get_owned(self, owner_id: str, event_id: str) -> Event | None:
        row = models.OwnedEvent.objects.filter(host_uid=owner_id, event_id=event_id).first()
        return _to_event(row) if row is not None else None

    @translate_store_errors
    def get_published(self, event_id: str) -> Event | None:
        row = models.PublishedEvent.objects.filter(event_id=event_id).first()
        return _to_event(row) if row is not None else None

    @translate_store_errors
    def save_owned(self, event: Event) -> None:
        models.OwnedEvent.objects.update_or_create(
            host_uid=event.host_uid,
            event_id=event.event_id,
            defaults=_row_fields(event),
        )

    @translate_store_errors
    def commit_publication(self, event: Event) -> None:
        fields = _row_fields(event)
        with transaction.atomic():
            models.OwnedEvent.objects.update_or_create(
                host_uid=event.host_uid,
                event_id=event.event_id,
                defaults=fields,
            )
            models.PublishedEvent.objects.update_or_create(
                event_id=event.event_id,
                defaults={"host_uid": event.host_uid, **fields},
            )
