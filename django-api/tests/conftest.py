"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from accounts.models import HostAccount
from accounts.services.host_service import HostRegistry
from accounts.services.kyc_service import KycGate
from accounts.services.session_service import SessionAuthenticator
from events.services.ownership import EventOwnershipResolver
from events.services.publication_service import PublicationWorkflow
from tests.fakes import (
    InMemoryEventStore,
    InMemoryHostAccountStore,
    InMemoryKycStore,
    InMemorySessionStore,
    StaticIdentityVerifier,
    SteppingClock,
)

# Identities registered as hosts by the host_registry fixture.
REGISTERED_HOSTS = ("host-1", "host-2")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def static_identity_verifier(settings):
    settings.IDENTITY_VERIFIER = "tests.fakes.StaticIdentityVerifier"


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def kyc_store() -> InMemoryKycStore:
    return InMemoryKycStore()


@pytest.fixture
def host_account_store() -> InMemoryHostAccountStore:
    return InMemoryHostAccountStore()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def host_registry(host_account_store, clock) -> HostRegistry:
    registry = HostRegistry(store=host_account_store, clock=clock)
    for owner_id in REGISTERED_HOSTS:
        registry.register(owner_id, name=owner_id)
    return registry


@pytest.fixture
def authenticator(session_store, host_registry, clock) -> SessionAuthenticator:
    return SessionAuthenticator(
        store=session_store,
        identity=StaticIdentityVerifier(),
        hosts=host_registry,
        clock=clock,
    )


@pytest.fixture
def kyc_gate(kyc_store) -> KycGate:
    return KycGate(store=kyc_store)


@pytest.fixture
def workflow(event_store, kyc_gate, clock) -> PublicationWorkflow:
    return PublicationWorkflow(
        store=event_store,
        kyc_gate=kyc_gate,
        resolver=EventOwnershipResolver(event_store),
        clock=clock,
    )


@pytest.fixture
def registered_hosts(db):
    """Host accounts in the database for every identity the API tests log in as."""
    for owner_id in REGISTERED_HOSTS:
        HostAccount.objects.create(owner_id=owner_id, name=owner_id, is_host=True)
