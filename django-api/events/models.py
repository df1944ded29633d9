"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.

An event is stored in up to two places: the host's own copy (draft or
published) and, once published, a global copy visible to everyone. Content
is kept in the same camelCase document form the API uses.
"""

from django.db import models


class EventStatus(models.TextChoices):
    DRAFT = "draft", "Draft"
    PUBLISHED = "published", "Published"


class EventDocument(models.Model):
    """Fields shared by both storage locations."""

    host_uid = models.CharField(max_length=128, db_index=True)
    status = models.CharField(max_length=16, choices=EventStatus.choices)
    basic_details = models.JSONField(default=dict)
    schedule = models.JSONField(default=dict)
    tickets = models.JSONField(default=dict)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()
    published_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        abstract = True

    @property
    def title(self) -> str:
        return (self.basic_details or {}).get("title") or ""

    def __str__(self) -> str:
        return self.title or self.event_id


class OwnedEvent(EventDocument):
    """Persistence model for the host-scoped copy of an event."""

    event_id = models.CharField(max_length=64)

    class Meta:
        ordering = ["-updated_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["host_uid", "event_id"], name="unique_owned_event"
            ),
        ]


class PublishedEvent(EventDocument):
    """Persistence model for the globally visible copy of a published event."""

    event_id = models.CharField(max_length=64, primary_key=True)

    class Meta:
        ordering = ["-published_at"]
