"""API tests for session login, logout and verification.

Run with: pytest tests/test_session_api.py -v
"""

import pytest
from django.db import DatabaseError
from django.utils.module_loading import import_string

from accounts.models import HostAccount, HostSession, KycRecord
from config.exceptions import domain_exception_handler
from tests.fakes import token_for

pytestmark = [pytest.mark.django_db, pytest.mark.usefixtures("registered_hosts")]

HOST = "host-1"


def _bearer(uid: str = HOST) -> dict:
    return {"HTTP_AUTHORIZATION": f"Bearer {token_for(uid)}"}


def _session_headers(session: dict) -> dict:
    return {
        "HTTP_X_SESSION_ID": session["sessionId"],
        "HTTP_X_SESSION_KEY": session["sessionKey"],
    }


def _login(api_client, uid: str = HOST) -> dict:
    response = api_client.post("/api/sessions", **_bearer(uid))
    assert response.status_code == 201
    return response.json()


class TestLogin:
    """Tests for POST /api/sessions."""

    def test_login_returns_session_id_and_key(self, api_client):
        body = _login(api_client)
        assert body["sessionId"]
        assert len(body["sessionKey"]) == 64

    def test_only_key_hash_is_stored(self, api_client):
        body = _login(api_client)
        row = HostSession.objects.get(session_id=body["sessionId"])
        assert row.owner_id == HOST
        assert row.key_hash != body["sessionKey"]
        assert row.source_ip == "127.0.0.1"

    def test_login_without_token(self, api_client):
        response = api_client.post("/api/sessions")
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_CREDENTIALS"

    def test_login_with_invalid_token(self, api_client):
        response = api_client.post("/api/sessions", HTTP_AUTHORIZATION="Bearer nonsense")
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_login_with_non_bearer_header(self, api_client):
        response = api_client.post("/api/sessions", HTTP_AUTHORIZATION="Basic abc")
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_identity_without_account_is_rejected(self, api_client):
        response = api_client.post("/api/sessions", **_bearer("stranger"))
        assert response.status_code == 403
        assert response.json()["error"] == "USER_NOT_FOUND"
        assert not HostSession.objects.exists()

    def test_customer_account_is_rejected(self, api_client):
        HostAccount.objects.create(
            owner_id="shopper", name="Shopper", is_host=True, is_customer=True
        )
        response = api_client.post("/api/sessions", **_bearer("shopper"))
        assert response.status_code == 403
        assert response.json()["error"] == "NOT_A_HOST_ACCOUNT"
        assert not HostSession.objects.exists()

    def test_store_outage_is_503(self, api_client, monkeypatch):
        def broken(*args, **kwargs):
            raise DatabaseError("timeout")

        monkeypatch.setattr(HostSession.objects, "create", broken)
        response = api_client.post("/api/sessions", **_bearer())
        assert response.status_code == 503
        assert response.json()["error"] == "STORE_UNAVAILABLE"
        assert response["Retry-After"] == "1"

    def test_list_sessions_hides_keys(self, api_client):
        first = _login(api_client)
        response = api_client.get("/api/sessions", **_bearer())
        assert response.status_code == 200
        sessions = response.json()["sessions"]
        assert [s["sessionId"] for s in sessions] == [first["sessionId"]]
        assert "sessionKey" not in sessions[0]
        assert "keyHash" not in sessions[0]


class TestCredentialErrors:
    """Every credential failure is a 401 with a specific code."""

    def test_no_credentials(self, api_client):
        response = api_client.get("/api/kyc")
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_CREDENTIALS"
        assert response["WWW-Authenticate"] == "Bearer"

    def test_exception_handler_is_the_project_handler(self, settings):
        path = settings.REST_FRAMEWORK["EXCEPTION_HANDLER"]
        assert path == "config.exceptions.domain_exception_handler"
        assert import_string(path) is domain_exception_handler

    def test_unknown_session(self, api_client):
        response = api_client.get(
            "/api/kyc", HTTP_X_SESSION_ID="missing", HTTP_X_SESSION_KEY="whatever"
        )
        assert response.status_code == 401
        assert response.json()["error"] == "SESSION_NOT_FOUND"

    def test_wrong_session_key(self, api_client):
        session = _login(api_client)
        session["sessionKey"] = "0" * 64
        response = api_client.get("/api/kyc", **_session_headers(session))
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION_KEY"

    def test_token_without_any_session(self, api_client):
        response = api_client.get("/api/kyc", **_bearer())
        assert response.status_code == 401
        assert response.json()["error"] == "NO_ACTIVE_SESSIONS"

    def test_token_and_session_key_resolve_same_host(self, api_client):
        session = _login(api_client)
        KycRecord.objects.create(owner_id=HOST, status="pending")

        by_token = api_client.get("/api/kyc", **_bearer())
        by_key = api_client.get("/api/kyc", **_session_headers(session))

        assert by_token.status_code == by_key.status_code == 200
        assert by_token.json()["kycStatus"] == by_key.json()["kycStatus"] == "pending"


class TestKycStatus:
    def test_host_without_record_is_none(self, api_client):
        session = _login(api_client)
        response = api_client.get("/api/kyc", **_session_headers(session))
        assert response.json()["kycStatus"] == "none"


class TestLogout:
    """Tests for single-device and all-device logout."""

    def test_logout_one_device(self, api_client):
        session = _login(api_client)
        response = api_client.delete(f"/api/sessions/{session['sessionId']}", **_bearer())
        assert response.status_code == 200
        assert response.json() == {"success": True, "deletedCount": 1}

        again = api_client.get("/api/kyc", **_session_headers(session))
        assert again.json()["error"] == "SESSION_NOT_FOUND"

    def test_logout_other_hosts_session_deletes_nothing(self, api_client):
        session = _login(api_client, "host-2")
        response = api_client.delete(f"/api/sessions/{session['sessionId']}", **_bearer())
        assert response.json()["deletedCount"] == 0
        assert HostSession.objects.filter(session_id=session["sessionId"]).exists()

    def test_revoke_all(self, api_client):
        _login(api_client)
        _login(api_client)
        response = api_client.post("/api/sessions/revoke-all", **_bearer())
        assert response.json() == {"success": True, "deletedCount": 2}
        assert not HostSession.objects.filter(owner_id=HOST).exists()

    def test_revoke_all_with_nothing_to_revoke(self, api_client):
        response = api_client.post("/api/sessions/revoke-all", **_bearer())
        assert response.status_code == 200
        assert response.json() == {"success": True, "deletedCount": 0, "message": "NO_SESSIONS"}

    def test_token_stops_working_after_revoke_all(self, api_client):
        _login(api_client)
        api_client.post("/api/sessions/revoke-all", **_bearer())
        response = api_client.get("/api/kyc", **_bearer())
        assert response.json()["error"] == "NO_ACTIVE_SESSIONS"


class TestVerify:
    """Tests for POST /api/sessions/verify."""

    def test_verify_body_credentials(self, api_client):
        session = _login(api_client)
        response = api_client.post("/api/sessions/verify", session, format="json")
        assert response.status_code == 200
        assert response.json() == {
            "uid": HOST,
            "sessionId": session["sessionId"],
            "verified": True,
        }

    def test_verify_header_credentials(self, api_client):
        session = _login(api_client)
        response = api_client.post(
            "/api/sessions/verify", {}, format="json", **_session_headers(session)
        )
        assert response.json()["uid"] == HOST

    def test_verify_bad_key(self, api_client):
        session = _login(api_client)
        session["sessionKey"] = "f" * 64
        response = api_client.post("/api/sessions/verify", session, format="json")
        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION_KEY"

    def test_verify_nothing(self, api_client):
        response = api_client.post("/api/sessions/verify", {}, format="json")
        assert response.status_code == 401
        assert response.json()["error"] == "MISSING_CREDENTIALS"

    def test_valid_body_wins_over_stale_headers(self, api_client):
        """Leftover headers from an old session do not block a valid body."""
        session = _login(api_client)
        response = api_client.post(
            "/api/sessions/verify",
            session,
            format="json",
            HTTP_X_SESSION_ID="stale-id",
            HTTP_X_SESSION_KEY="stale-key",
        )
        assert response.status_code == 200
        assert response.json()["sessionId"] == session["sessionId"]

    def test_verify_body_id_token(self, api_client):
        _login(api_client)
        response = api_client.post(
            "/api/sessions/verify", {"idToken": token_for(HOST)}, format="json"
        )
        assert response.status_code == 200
        assert response.json() == {"uid": HOST, "sessionId": None, "verified": True}

    def test_verify_body_id_token_without_sessions(self, api_client):
        response = api_client.post(
            "/api/sessions/verify", {"idToken": token_for(HOST)}, format="json"
        )
        assert response.status_code == 401
        assert response.json()["error"] == "NO_ACTIVE_SESSIONS"


class TestHostRegistration:
    """Tests for POST /api/hosts/register."""

    def test_register_then_log_in(self, api_client):
        response = api_client.post(
            "/api/hosts/register", {"name": "New Host"}, format="json", **_bearer("newcomer")
        )
        assert response.status_code == 201
        assert response.json() == {"success": True, "created": True}
        assert HostAccount.objects.get(owner_id="newcomer").is_host

        login = api_client.post("/api/sessions", **_bearer("newcomer"))
        assert login.status_code == 201

    def test_register_existing_host_updates(self, api_client):
        response = api_client.post(
            "/api/hosts/register",
            {"name": "Renamed", "phone": "555-0100"},
            format="json",
            **_bearer(),
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "updated": True}
        account = HostAccount.objects.get(owner_id=HOST)
        assert account.name == "Renamed"
        assert account.phone == "555-0100"

    def test_customer_cannot_register(self, api_client):
        HostAccount.objects.create(owner_id="shopper", name="Shopper", is_customer=True)
        response = api_client.post(
            "/api/hosts/register", {"name": "Shopper"}, format="json", **_bearer("shopper")
        )
        assert response.status_code == 409
        assert response.json()["error"] == "ACCOUNT_ALREADY_CUSTOMER"
        assert not HostAccount.objects.get(owner_id="shopper").is_host

    def test_name_is_required(self, api_client):
        response = api_client.post(
            "/api/hosts/register", {}, format="json", **_bearer("newcomer")
        )
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"

    def test_requires_identity_token(self, api_client):
        response = api_client.post("/api/hosts/register", {"name": "x"}, format="json")
        assert response.status_code == 401
