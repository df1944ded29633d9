"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to the project exception handler
- Never contain business logic
- Never expose internal error details
"""

import ipaddress

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import IdentityTokenAuthentication, credentials_from_request
from accounts.domain import HostCredentials
from accounts.handlers.serializers import (
    HostRegisterSerializer,
    IssuedSessionSerializer,
    KycStatusSerializer,
    SessionSerializer,
    SessionVerifySerializer,
)
from accounts.providers import (
    build_host_registry,
    build_kyc_gate,
    build_session_authenticator,
)


def client_ip(request: Request) -> str | None:
    """First X-Forwarded-For hop, else the socket peer address."""
    forwarded = request.headers.get("X-Forwarded-For", "")
    candidate = forwarded.split(",")[0].strip() or request.META.get("REMOTE_ADDR")
    if not candidate:
        return None
    try:
        return str(ipaddress.ip_address(candidate))
    except ValueError:
        return None


class SessionListView(APIView):
    """Handler for GET (list) and POST (login) /api/sessions"""

    authentication_classes = [IdentityTokenAuthentication]

    def get(self, request: Request) -> Response:
        sessions = build_session_authenticator().list_sessions(request.user.uid)
        return Response({"sessions": SessionSerializer(sessions, many=True).data})

    def post(self, request: Request) -> Response:
        issued = build_session_authenticator().issue(
            request.user.uid,
            user_agent=request.headers.get("User-Agent"),
            source_ip=client_ip(request),
        )
        return Response(IssuedSessionSerializer(issued).data, status=status.HTTP_201_CREATED)


class SessionDetailView(APIView):
    """Handler for DELETE /api/sessions/{session_id} (logout one device)"""

    authentication_classes = [IdentityTokenAuthentication]

    def delete(self, request: Request, session_id: str) -> Response:
        deleted = build_session_authenticator().revoke_one(request.user.uid, session_id)
        return Response({"success": True, "deletedCount": deleted})


class SessionRevokeAllView(APIView):
    """Handler for POST /api/sessions/revoke-all (logout all devices)"""

    authentication_classes = [IdentityTokenAuthentication]

    def post(self, request: Request) -> Response:
        deleted = build_session_authenticator().revoke_all(request.user.uid)
        body = {"success": True, "deletedCount": deleted}
        if deleted == 0:
            body["message"] = "NO_SESSIONS"
        return Response(body)


class SessionVerifyView(APIView):
    """Handler for POST /api/sessions/verify

    Body credentials take priority over headers. An idToken in the body is
    checked before a session pair.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def get_authenticate_header(self, request: Request) -> str:
        return "Bearer"

    def post(self, request: Request) -> Response:
        serializer = SessionVerifySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        body = HostCredentials(
            id_token=data.get("id_token") or None,
            session_id=data.get("session_id") or None,
            session_key=data.get("session_key") or None,
        )
        credentials = body if not body.is_empty() else credentials_from_request(request)

        host = build_session_authenticator().authenticate(credentials)
        return Response({"uid": host.uid, "sessionId": host.session_id, "verified": True})


class KycStatusView(APIView):
    """Handler for GET /api/kyc"""

    def get(self, request: Request) -> Response:
        record = build_kyc_gate().record(request.user.uid)
        return Response(KycStatusSerializer(record).data)


class HostRegisterView(APIView):
    """Handler for POST /api/hosts/register

    Creates the caller's host account, or upgrades an existing non-customer
    account. Required before the first login.
    """

    authentication_classes = [IdentityTokenAuthentication]

    def post(self, request: Request) -> Response:
        serializer = HostRegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        _, created = build_host_registry().register(
            request.user.uid,
            serializer.validated_data["name"],
            phone=serializer.validated_data.get("phone") or None,
        )
        if created:
            return Response({"success": True, "created": True}, status=status.HTTP_201_CREATED)
        return Response({"success": True, "updated": True})
