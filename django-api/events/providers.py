"""Builds the publication workflow wired to its Django-backed stores."""

from accounts.providers import build_kyc_gate
from events.services.ownership import EventOwnershipResolver
from events.services.publication_service import PublicationWorkflow
from events.stores.django_store import DjangoEventStore


def build_publication_workflow() -> PublicationWorkflow:
    store = DjangoEventStore()
    return PublicationWorkflow(
        store=store,
        kyc_gate=build_kyc_gate(),
        resolver=EventOwnershipResolver(store),
    )
