"""Session service - issues and verifies host session credentials.

Services:
- Depend only on interfaces (stores, identity verifier)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

A session credential is a session id plus a raw key. The raw key is handed
to the client once and only its sha256 digest is stored. It is never
logged.
"""

import hmac
import logging
import secrets
import uuid
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from accounts.domain import (
    AuthenticatedHost,
    AuthMethod,
    HostCredentials,
    IssuedSession,
    Session,
    hash_session_key,
)
from accounts.domain.errors import (
    InvalidSessionKeyError,
    MissingCredentialsError,
    NoActiveSessionError,
    SessionNotFoundError,
)
from accounts.identity import IdentityVerifier
from accounts.services.host_service import HostRegistry
from accounts.stores.interfaces import SessionStore

logger = logging.getLogger(__name__)

# 32 random bytes, 256 bits of entropy.
SESSION_KEY_BYTES = 32


class SessionAuthenticator:
    """Service for host session issuance, verification and revocation."""

    def __init__(
        self,
        store: SessionStore,
        identity: IdentityVerifier,
        hosts: HostRegistry,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._identity = identity
        self._hosts = hosts
        self._clock = clock

    def issue(
        self,
        owner_id: str,
        user_agent: str | None = None,
        source_ip: str | None = None,
    ) -> IssuedSession:
        """Create a session for the owner and return its raw key once.

        Raises:
            UserNotFoundError: If the identity has no account.
            NotAHostAccountError: If the account may not host.
        """
        self._hosts.require_host(owner_id)
        session_id = str(uuid.uuid4())
        raw_key = secrets.token_hex(SESSION_KEY_BYTES)
        self._store.add(
            Session(
                session_id=session_id,
                owner_id=owner_id,
                key_hash=hash_session_key(raw_key),
                created_at=self._clock(),
                user_agent=user_agent,
                source_ip=source_ip,
            )
        )
        logger.info("Session issued", extra={"owner_id": owner_id, "session_id": session_id})
        return IssuedSession(session_id=session_id, raw_key=raw_key, owner_id=owner_id)

    def verify(self, session_id: str, raw_key: str) -> str:
        """Return the owner of the session if the key matches.

        The digests are compared with hmac.compare_digest so the time taken
        does not depend on how much of the candidate matches.

        Raises:
            SessionNotFoundError: If no session has this id.
            InvalidSessionKeyError: If the key does not match.
        """
        session = self._store.get(session_id)
        if session is None:
            logger.warning("Unknown session id presented", extra={"session_id": session_id})
            raise SessionNotFoundError()

        candidate = hash_session_key(raw_key)
        if not hmac.compare_digest(candidate, session.key_hash):
            logger.warning("Session key mismatch", extra={"session_id": session_id})
            raise InvalidSessionKeyError()

        return session.owner_id

    def verify_identity_token(self, token: str, require_session: bool = True) -> str:
        """Return the subject id behind an identity token.

        With require_session, the subject must also hold at least one host
        session; login is the only flow that skips this.

        Raises:
            InvalidTokenError: If the identity provider rejects the token.
            NoActiveSessionError: If a session is required and none exists.
        """
        owner_id = self._identity.verify_token(token)
        if require_session and not self._store.has_sessions(owner_id):
            logger.warning("Token caller has no host session", extra={"owner_id": owner_id})
            raise NoActiveSessionError()
        return owner_id

    def authenticate(self, credentials: HostCredentials) -> AuthenticatedHost:
        """Resolve either credential form to a single authenticated host.

        A bearer token takes precedence over a session id + key pair.
        """
        if credentials.has_token:
            uid = self.verify_identity_token(credentials.id_token)
            return AuthenticatedHost(uid=uid, method=AuthMethod.ID_TOKEN)

        if credentials.has_session_pair:
            uid = self.verify(credentials.session_id, credentials.session_key)
            return AuthenticatedHost(
                uid=uid,
                method=AuthMethod.SESSION_KEY,
                session_id=credentials.session_id,
            )

        raise MissingCredentialsError()

    def list_sessions(self, owner_id: str) -> list[Session]:
        return self._store.list_for_owner(owner_id)

    def revoke_one(self, owner_id: str, session_id: str) -> int:
        """Log out a single device. Revoking an absent session is not an error."""
        deleted = self._store.delete(owner_id, session_id)
        logger.info(
            "Session revoked",
            extra={"owner_id": owner_id, "session_id": session_id, "deleted_count": deleted},
        )
        return deleted

    def revoke_all(self, owner_id: str) -> int:
        """Log out every device of the owner. Safe to repeat."""
        deleted = self._store.delete_all(owner_id)
        if deleted == 0:
            logger.info("No sessions to delete", extra={"owner_id": owner_id})
        else:
            logger.info(
                "All sessions revoked",
                extra={"owner_id": owner_id, "deleted_count": deleted},
            )
        return deleted
