"""Publication service - all event submission business logic lives here.

Services:
- Depend only on interfaces (stores) and other services
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Submitting an event either saves it as a draft (host-only, no checks) or
attempts to publish it. A publish that is blocked by KYC or by validation
still saves the submitted content as a draft, so the host never loses work.
A successful publish writes the host's copy and the global copy in one
atomic step.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from django.utils import timezone

from accounts.services.kyc_service import KycGate
from events.domain import Event, EventContent, EventId, EventStatus
from events.domain.errors import (
    EventAccessDeniedError,
    EventNotFoundError,
    InvalidEventIdError,
)
from events.domain.validation import validate_event
from events.services.ownership import EventOwnershipResolver
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class SubmissionMode(Enum):
    DRAFT = "draft"
    PUBLISH = "publish"


class PublicationOutcome(Enum):
    DRAFT_SAVED = "draft_saved"
    PUBLISHED = "published"
    KYC_BLOCKED = "kyc_blocked"
    VALIDATION_BLOCKED = "validation_blocked"


@dataclass(frozen=True)
class PublicationResult:
    """What happened to a submission. Blocks are results, not errors."""

    event_id: str
    outcome: PublicationOutcome
    status: EventStatus
    saved_at: datetime
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def blocked(self) -> bool:
        return self.outcome in (
            PublicationOutcome.KYC_BLOCKED,
            PublicationOutcome.VALIDATION_BLOCKED,
        )

    @property
    def saved_as_draft(self) -> bool:
        return self.status is EventStatus.DRAFT


class PublicationWorkflow:
    """Service for the draft/publish state machine."""

    def __init__(
        self,
        store: EventStore,
        kyc_gate: KycGate,
        resolver: EventOwnershipResolver,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._kyc_gate = kyc_gate
        self._resolver = resolver
        self._clock = clock

    def resolve_target(self, owner_id: str, event_id: str | None) -> str:
        """Return the id to write to: a fresh one for new events.

        Raises:
            InvalidEventIdError: If event_id is not a valid UUID.
            EventNotFoundError: If event_id exists in neither location.
            EventAccessDeniedError: If the event belongs to another host.
        """
        if not event_id:
            return str(EventId.generate())

        try:
            event_id = str(EventId.from_string(event_id))
        except ValueError:
            raise InvalidEventIdError() from None

        resolution = self._resolver.resolve(owner_id, event_id)
        if not resolution.exists:
            raise EventNotFoundError()
        if not resolution.owned:
            logger.warning(
                "Event access denied",
                extra={"owner_id": owner_id, "event_id": event_id},
            )
            raise EventAccessDeniedError()
        return event_id

    def submit(
        self,
        owner_id: str,
        mode: SubmissionMode,
        content: EventContent,
        event_id: str | None = None,
    ) -> PublicationResult:
        """Create or update an event in the requested mode."""
        target = self.resolve_target(owner_id, event_id)
        if mode is SubmissionMode.DRAFT:
            return self.save_draft(owner_id, target, content)
        return self.publish(owner_id, target, content)

    def save_draft(self, owner_id: str, event_id: str, content: EventContent) -> PublicationResult:
        """Upsert the host's copy as a draft. The published copy is left alone."""
        now = self._draft_write(owner_id, event_id, content)
        return PublicationResult(
            event_id=event_id,
            outcome=PublicationOutcome.DRAFT_SAVED,
            status=EventStatus.DRAFT,
            saved_at=now,
        )

    def publish(self, owner_id: str, event_id: str, content: EventContent) -> PublicationResult:
        """Publish if the host is verified and the event is valid.

        Otherwise the content is saved as a draft and a blocked result is
        returned. Re-publishing an already published event runs every check
        again.
        """
        kyc_status = self._kyc_gate.status(owner_id)
        if not self._kyc_gate.permits_publication(kyc_status):
            now = self._draft_write(owner_id, event_id, content)
            logger.info(
                "Publish blocked by KYC",
                extra={"owner_id": owner_id, "event_id": event_id, "kyc_status": kyc_status.value},
            )
            return PublicationResult(
                event_id=event_id,
                outcome=PublicationOutcome.KYC_BLOCKED,
                status=EventStatus.DRAFT,
                saved_at=now,
            )

        errors = validate_event(content)
        if errors:
            now = self._draft_write(owner_id, event_id, content)
            logger.info(
                "Publish blocked by validation",
                extra={"owner_id": owner_id, "event_id": event_id, "error_count": len(errors)},
            )
            return PublicationResult(
                event_id=event_id,
                outcome=PublicationOutcome.VALIDATION_BLOCKED,
                status=EventStatus.DRAFT,
                saved_at=now,
                errors=errors,
            )

        now = self._clock()
        existing = self._store.get_owned(owner_id, event_id)
        # The global copy always takes created_at from the host's copy, even
        # if it held a different value before.
        created_at = existing.created_at if existing is not None else now
        self._store.commit_publication(
            Event(
                event_id=event_id,
                host_uid=owner_id,
                status=EventStatus.PUBLISHED,
                content=content,
                created_at=created_at,
                updated_at=now,
                published_at=now,
            )
        )
        logger.info("Event published", extra={"owner_id": owner_id, "event_id": event_id})
        return PublicationResult(
            event_id=event_id,
            outcome=PublicationOutcome.PUBLISHED,
            status=EventStatus.PUBLISHED,
            saved_at=now,
        )

    def get_event(self, owner_id: str, event_id: str) -> Event:
        """Return the caller's event, preferring its own copy.

        Raises:
            InvalidEventIdError: If event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            EventAccessDeniedError: If the event belongs to another host.
        """
        try:
            event_id = str(EventId.from_string(event_id))
        except ValueError:
            raise InvalidEventIdError() from None

        located = self._store.locate(owner_id, event_id)
        if located is None:
            raise EventNotFoundError()
        if located.event.host_uid != owner_id:
            raise EventAccessDeniedError()
        return located.event

    def _draft_write(self, owner_id: str, event_id: str, content: EventContent) -> datetime:
        now = self._clock()
        existing = self._store.get_owned(owner_id, event_id)
        if existing is None:
            draft = Event(
                event_id=event_id,
                host_uid=owner_id,
                status=EventStatus.DRAFT,
                content=content,
                created_at=now,
                updated_at=now,
            )
        else:
            draft = replace(existing, status=EventStatus.DRAFT, content=content, updated_at=now)
        self._store.save_owned(draft)
        return now
