from django.urls import path

from accounts.handlers import (
    HostRegisterView,
    KycStatusView,
    SessionDetailView,
    SessionListView,
    SessionRevokeAllView,
    SessionVerifyView,
)

urlpatterns = [
    path("sessions", SessionListView.as_view(), name="session-list"),
    path("sessions/verify", SessionVerifyView.as_view(), name="session-verify"),
    path("sessions/revoke-all", SessionRevokeAllView.as_view(), name="session-revoke-all"),
    path(
        "sessions/<str:session_id>",
        SessionDetailView.as_view(),
        name="session-detail",
    ),
    path("hosts/register", HostRegisterView.as_view(), name="host-register"),
    path("kyc", KycStatusView.as_view(), name="kyc-status"),
]
