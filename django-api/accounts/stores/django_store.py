"""Django ORM implementations of the account stores."""

import functools
import logging

from django.db import DatabaseError

from accounts import models
from accounts.domain import HostAccount, KycRecord, KycStatus, Session
from accounts.domain.errors import StoreUnavailableError
from accounts.stores.interfaces import HostAccountStore, KycStore, SessionStore

logger = logging.getLogger(__name__)


def translate_store_errors(method):
    """Surface database failures and timeouts as a retryable domain error."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except DatabaseError as exc:
            logger.error(
                "Store operation failed",
                extra={"operation": method.__qualname__, "error": str(exc)},
            )
            raise StoreUnavailableError() from exc

    return wrapper


def _to_session(row: models.HostSession) -> Session:
    return Session(
        session_id=row.session_id,
        owner_id=row.owner_id,
        key_hash=row.key_hash,
        created_at=row.created_at,
        user_agent=row.user_agent,
        source_ip=row.source_ip,
    )


class DjangoSessionStore(SessionStore):
    """Database-backed session store using Django ORM."""

    @translate_store_errors
    def add(self, session: Session) -> None:
        models.HostSession.objects.create(
            session_id=session.session_id,
            owner_id=session.owner_id,
            key_hash=session.key_hash,
            user_agent=session.user_agent,
            source_ip=session.source_ip,
            created_at=session.created_at,
        )

    @translate_store_errors
    def get(self, session_id: str) -> Session | None:
        row = models.HostSession.objects.filter(session_id=session_id).first()
        return _to_session(row) if row is not None else None

    @translate_store_errors
    def has_sessions(self, owner_id: str) -> bool:
        return models.HostSession.objects.filter(owner_id=owner_id).exists()

    @translate_store_errors
    def list_for_owner(self, owner_id: str) -> list[Session]:
        return [_to_session(row) for row in models.HostSession.objects.filter(owner_id=owner_id)]

    @translate_store_errors
    def delete(self, owner_id: str, session_id: str) -> int:
        deleted, _ = models.HostSession.objects.filter(
            owner_id=owner_id, session_id=session_id
        ).delete()
        return deleted

    @translate_store_errors
    def delete_all(self, owner_id: str) -> int:
        deleted, _ = models.HostSession.objects.filter(owner_id=owner_id).delete()
        return deleted


class DjangoKycStore(KycStore):
    """Database-backed KYC record reader."""

    @translate_store_errors
    def get_record(self, owner_id: str) -> KycRecord | None:
        row = models.KycRecord.objects.filter(owner_id=owner_id).first()
        if row is None:
            return None
        return KycRecord(
            owner_id=row.owner_id,
            status=KycStatus(row.status),
            submitted_at=row.submitted_at,
            verified_at=row.verified_at,
            rejection_reason=row.rejection_reason,
        )


class DjangoHostAccountStore(HostAccountStore):
    """Database-backed platform account store."""

    @translate_store_errors
    def get(self, owner_id: str) -> HostAccount | None:
        row = models.HostAccount.objects.filter(owner_id=owner_id).first()
        if row is None:
            return None
        return HostAccount(
            owner_id=row.owner_id,
            name=row.name,
            phone=row.phone,
            is_host=row.is_host,
            is_customer=row.is_customer,
            created_at=row.created_at,
        )

    @translate_store_errors
    def save(self, account: HostAccount) -> None:
        models.HostAccount.objects.update_or_create(
            owner_id=account.owner_id,
            defaults={
                "name": account.name,
                "phone": account.phone,
                "is_host": account.is_host,
                "is_customer": account.is_customer,
                "created_at": account.created_at,
            },
        )
