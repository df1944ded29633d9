"""Builds account services wired to their Django-backed stores."""

from accounts.identity import get_identity_verifier
from accounts.services.host_service import HostRegistry
from accounts.services.kyc_service import KycGate
from accounts.services.session_service import SessionAuthenticator
from accounts.stores.django_store import (
    DjangoHostAccountStore,
    DjangoKycStore,
    DjangoSessionStore,
)


def build_host_registry() -> HostRegistry:
    return HostRegistry(store=DjangoHostAccountStore())


def build_session_authenticator() -> SessionAuthenticator:
    return SessionAuthenticator(
        store=DjangoSessionStore(),
        identity=get_identity_verifier(),
        hosts=build_host_registry(),
    )


def build_kyc_gate() -> KycGate:
    return KycGate(store=DjangoKycStore())
