from accounts.handlers.views import (
    HostRegisterView,
    KycStatusView,
    SessionDetailView,
    SessionListView,
    SessionRevokeAllView,
    SessionVerifyView,
)

__all__ = [
    "HostRegisterView",
    "KycStatusView",
    "SessionDetailView",
    "SessionListView",
    "SessionRevokeAllView",
    "SessionVerifyView",
]
