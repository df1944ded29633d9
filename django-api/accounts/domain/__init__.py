from accounts.domain.models import (
    AuthenticatedHost,
    AuthMethod,
    HostAccount,
    HostCredentials,
    IssuedSession,
    KycRecord,
    KycStatus,
    Session,
    hash_session_key,
)

__all__ = [
    "AuthenticatedHost",
    "AuthMethod",
    "HostAccount",
    "HostCredentials",
    "IssuedSession",
    "KycRecord",
    "KycStatus",
    "Session",
    "hash_session_key",
]
