"""Host registry - decides which identities may hold host sessions.

An identity can host once it has an account flagged as a host. Customer
accounts are kept apart and can never be upgraded to hosts.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from django.utils import timezone

from accounts.domain import HostAccount
from accounts.domain.errors import (
    AccountConflictError,
    NotAHostAccountError,
    UserNotFoundError,
)
from accounts.stores.interfaces import HostAccountStore

logger = logging.getLogger(__name__)


class HostRegistry:
    """Service for host account registration and host checks."""

    def __init__(
        self,
        store: HostAccountStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._clock = clock

    def register(
        self, owner_id: str, name: str, phone: str | None = None
    ) -> tuple[HostAccount, bool]:
        """Create a host account, or upgrade an existing non-customer one.

        Returns the account and whether it was newly created.

        Raises:
            AccountConflictError: If the identity is a customer account.
        """
        existing = self._store.get(owner_id)
        if existing is not None:
            if existing.is_customer:
                logger.warning("Customer tried to register as host", extra={"owner_id": owner_id})
                raise AccountConflictError()
            account = replace(existing, name=name, phone=phone, is_host=True, is_customer=False)
            self._store.save(account)
            logger.info("Account upgraded to host", extra={"owner_id": owner_id})
            return account, False

        account = HostAccount(
            owner_id=owner_id,
            name=name,
            phone=phone,
            is_host=True,
            is_customer=False,
            created_at=self._clock(),
        )
        self._store.save(account)
        logger.info("Host account created", extra={"owner_id": owner_id})
        return account, True

    def require_host(self, owner_id: str) -> HostAccount:
        """Return the account if the identity may host.

        Raises:
            UserNotFoundError: If the identity has no account.
            NotAHostAccountError: If the account is not a host, or is a customer.
        """
        account = self._store.get(owner_id)
        if account is None:
            raise UserNotFoundError()
        if not account.can_host:
            raise NotAHostAccountError()
        return account
