"""Unit tests for SessionAuthenticator and HostRegistry.

These run against in-memory stores.
Run with: pytest tests/test_sessions.py -v
"""

import hmac

import pytest

from accounts.domain import AuthMethod, HostAccount, HostCredentials, hash_session_key
from accounts.domain.errors import (
    AccountConflictError,
    InvalidSessionKeyError,
    InvalidTokenError,
    MissingCredentialsError,
    NoActiveSessionError,
    NotAHostAccountError,
    SessionNotFoundError,
    UserNotFoundError,
)
from accounts.services import session_service
from tests.fakes import token_for


class TestIssue:
    """Tests for session issuance."""

    def test_issue_stores_hash_not_raw_key(self, authenticator, session_store):
        """Only the sha256 of the raw key is persisted."""
        issued = authenticator.issue("host-1")
        stored = session_store.get(issued.session_id)
        assert stored.key_hash == hash_session_key(issued.raw_key)
        assert issued.raw_key not in vars(stored).values()

    def test_raw_key_has_256_bits(self, authenticator):
        issued = authenticator.issue("host-1")
        assert len(bytes.fromhex(issued.raw_key)) == 32

    def test_session_ids_and_keys_are_unique(self, authenticator):
        first = authenticator.issue("host-1")
        second = authenticator.issue("host-1")
        assert first.session_id != second.session_id
        assert first.raw_key != second.raw_key

    def test_issue_records_client_metadata(self, authenticator, session_store):
        issued = authenticator.issue("host-1", user_agent="Mozilla/5.0", source_ip="10.0.0.1")
        stored = session_store.get(issued.session_id)
        assert stored.owner_id == "host-1"
        assert stored.user_agent == "Mozilla/5.0"
        assert stored.source_ip == "10.0.0.1"

    def test_repr_does_not_leak_raw_key(self, authenticator):
        issued = authenticator.issue("host-1")
        assert issued.raw_key not in repr(issued)

    def test_unknown_identity_gets_no_session(self, authenticator, session_store):
        with pytest.raises(UserNotFoundError):
            authenticator.issue("stranger")
        assert session_store.sessions == {}

    def test_customer_account_gets_no_session(
        self, authenticator, host_account_store, session_store
    ):
        """An account flagged as a customer cannot log in as a host."""
        host_account_store.save(
            HostAccount(owner_id="shopper", name="Shopper", is_host=True, is_customer=True)
        )
        with pytest.raises(NotAHostAccountError):
            authenticator.issue("shopper")
        assert session_store.sessions == {}

    def test_account_without_host_flag_gets_no_session(self, authenticator, host_account_store):
        host_account_store.save(HostAccount(owner_id="plain", name="Plain"))
        with pytest.raises(NotAHostAccountError):
            authenticator.issue("plain")


class TestVerify:
    """Tests for session id + key verification."""

    def test_verify_returns_owner(self, authenticator):
        issued = authenticator.issue("host-1")
        assert authenticator.verify(issued.session_id, issued.raw_key) == "host-1"

    def test_verify_wrong_key(self, authenticator):
        issued = authenticator.issue("host-1")
        with pytest.raises(InvalidSessionKeyError):
            authenticator.verify(issued.session_id, "0" * 64)

    def test_verify_unknown_session(self, authenticator):
        with pytest.raises(SessionNotFoundError):
            authenticator.verify("does-not-exist", "anything")

    def test_verify_finds_session_of_any_owner(self, authenticator):
        """Lookup is global: the owner is recovered from the session itself."""
        authenticator.issue("host-1")
        other = authenticator.issue("host-2")
        assert authenticator.verify(other.session_id, other.raw_key) == "host-2"

    def test_verify_compares_in_constant_time(self, authenticator, monkeypatch):
        """Hash comparison goes through hmac.compare_digest."""
        calls = []
        real_compare = hmac.compare_digest

        def spy(a, b):
            calls.append((a, b))
            return real_compare(a, b)

        monkeypatch.setattr(session_service.hmac, "compare_digest", spy)
        issued = authenticator.issue("host-1")
        authenticator.verify(issued.session_id, issued.raw_key)
        assert calls == [(hash_session_key(issued.raw_key), hash_session_key(issued.raw_key))]

    def test_wrong_key_still_goes_through_compare_digest(self, authenticator, monkeypatch):
        calls = []
        real_compare = hmac.compare_digest

        def spy(a, b):
            calls.append((a, b))
            return real_compare(a, b)

        monkeypatch.setattr(session_service.hmac, "compare_digest", spy)
        issued = authenticator.issue("host-1")
        with pytest.raises(InvalidSessionKeyError):
            authenticator.verify(issued.session_id, "0" * 64)
        assert len(calls) == 1


class TestIdentityToken:
    """Tests for identity-token verification."""

    def test_token_requires_existing_session(self, authenticator):
        with pytest.raises(NoActiveSessionError):
            authenticator.verify_identity_token(token_for("host-1"))

    def test_token_accepted_with_session(self, authenticator):
        authenticator.issue("host-1")
        assert authenticator.verify_identity_token(token_for("host-1")) == "host-1"

    def test_token_without_session_requirement(self, authenticator):
        """Login verifies the token alone."""
        assert (
            authenticator.verify_identity_token(token_for("host-1"), require_session=False)
            == "host-1"
        )

    def test_invalid_token(self, authenticator):
        with pytest.raises(InvalidTokenError):
            authenticator.verify_identity_token("garbage", require_session=False)


class TestAuthenticate:
    """Both credential forms resolve to the same owner."""

    def test_both_forms_normalize_to_same_uid(self, authenticator):
        issued = authenticator.issue("host-1")
        by_token = authenticator.authenticate(HostCredentials(id_token=token_for("host-1")))
        by_key = authenticator.authenticate(
            HostCredentials(session_id=issued.session_id, session_key=issued.raw_key)
        )
        assert by_token.uid == by_key.uid == "host-1"
        assert by_token.method is AuthMethod.ID_TOKEN
        assert by_key.method is AuthMethod.SESSION_KEY
        assert by_key.session_id == issued.session_id

    def test_token_takes_precedence(self, authenticator):
        """A valid token wins even if the session pair is wrong."""
        authenticator.issue("host-1")
        host = authenticator.authenticate(
            HostCredentials(id_token=token_for("host-1"), session_id="x", session_key="y")
        )
        assert host.uid == "host-1"

    def test_missing_credentials(self, authenticator):
        with pytest.raises(MissingCredentialsError):
            authenticator.authenticate(HostCredentials(session_id="only-id"))


class TestRevoke:
    """Tests for logout of one or all devices."""

    def test_revoke_all_is_idempotent(self, authenticator):
        authenticator.issue("host-1")
        authenticator.issue("host-1")
        assert authenticator.revoke_all("host-1") == 2
        assert authenticator.revoke_all("host-1") == 0

    def test_revoke_all_leaves_other_owners(self, authenticator):
        other = authenticator.issue("host-2")
        authenticator.issue("host-1")
        authenticator.revoke_all("host-1")
        assert authenticator.verify(other.session_id, other.raw_key) == "host-2"

    def test_revoke_one_is_idempotent(self, authenticator):
        issued = authenticator.issue("host-1")
        assert authenticator.revoke_one("host-1", issued.session_id) == 1
        assert authenticator.revoke_one("host-1", issued.session_id) == 0
        with pytest.raises(SessionNotFoundError):
            authenticator.verify(issued.session_id, issued.raw_key)

    def test_revoke_one_cannot_touch_foreign_session(self, authenticator):
        other = authenticator.issue("host-2")
        assert authenticator.revoke_one("host-1", other.session_id) == 0
        assert authenticator.verify(other.session_id, other.raw_key) == "host-2"

    def test_list_sessions_newest_first(self, authenticator):
        older = authenticator.issue("host-1")
        newer = authenticator.issue("host-1")
        listed = [s.session_id for s in authenticator.list_sessions("host-1")]
        assert listed == [newer.session_id, older.session_id]


class TestHostRegistry:
    """Tests for host account registration."""

    def test_register_new_host(self, host_registry, host_account_store):
        account, created = host_registry.register("new-host", "New Host", phone="555-0100")
        assert created
        assert account.can_host
        assert host_account_store.get("new-host") == account

    def test_register_upgrades_existing_account(self, host_registry, host_account_store):
        host_account_store.save(HostAccount(owner_id="plain", name="Old name"))
        account, created = host_registry.register("plain", "New name")
        assert not created
        assert account.name == "New name"
        assert account.can_host

    def test_customer_cannot_register(self, host_registry, host_account_store):
        customer = HostAccount(owner_id="shopper", name="Shopper", is_customer=True)
        host_account_store.save(customer)
        with pytest.raises(AccountConflictError):
            host_registry.register("shopper", "Shopper")
        assert host_account_store.get("shopper") == customer

    def test_registered_host_can_log_in(self, host_registry, authenticator):
        host_registry.register("new-host", "New Host")
        issued = authenticator.issue("new-host")
        assert authenticator.verify(issued.session_id, issued.raw_key) == "new-host"
