"""DRF authentication classes for host credentials.

Two client contexts reach the same resources: browsers holding an identity
token and middleware holding a session id + key. Both resolve to an
AuthenticatedHost before any view runs.
"""

from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from accounts.domain import AuthenticatedHost, AuthMethod, HostCredentials
from accounts.domain.errors import AuthenticationError
from accounts.providers import build_session_authenticator

SESSION_ID_HEADER = "X-Session-Id"
SESSION_KEY_HEADER = "X-Session-Key"


def bearer_token(request) -> str | None:
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None
    if not auth_header.startswith("Bearer "):
        raise AuthenticationFailed(
            "Invalid token header. Use Bearer <token>.", code="INVALID_TOKEN"
        )
    return auth_header[len("Bearer "):].strip() or None


def credentials_from_request(request) -> HostCredentials:
    return HostCredentials(
        id_token=bearer_token(request),
        session_id=request.headers.get(SESSION_ID_HEADER) or None,
        session_key=request.headers.get(SESSION_KEY_HEADER) or None,
    )


class HostSessionAuthentication(BaseAuthentication):
    """Accepts `Authorization: Bearer <token>` or `X-Session-Id` + `X-Session-Key`.

    A bearer token is only accepted from a host that holds at least one
    session.
    """

    def authenticate(self, request):
        credentials = credentials_from_request(request)
        if credentials.is_empty():
            return None  # No credentials → unauthenticated (not unauthorized)

        try:
            host = build_session_authenticator().authenticate(credentials)
        except AuthenticationError as exc:
            raise AuthenticationFailed(exc.message, code=exc.code.value) from exc
        return (host, None)

    def authenticate_header(self, request):
        return "Bearer"


class IdentityTokenAuthentication(BaseAuthentication):
    """Accepts a bearer identity token alone, without requiring a session.

    Used by login and logout, where the caller may hold no session yet (or
    any more).
    """

    def authenticate(self, request):
        token = bearer_token(request)
        if token is None:
            return None

        try:
            uid = build_session_authenticator().verify_identity_token(
                token, require_session=False
            )
        except AuthenticationError as exc:
            raise AuthenticationFailed(exc.message, code=exc.code.value) from exc
        return (AuthenticatedHost(uid=uid, method=AuthMethod.ID_TOKEN), None)

    def authenticate_header(self, request):
        return "Bearer"
