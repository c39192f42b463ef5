"""Tests for the treatment authorization store."""

import pytest

from healthledger.schemas.records import AuthorizationStatus
from healthledger.services.authorizations import AuthorizationStore
from healthledger.services.errors import AuthorizationError, LedgerError


def _request(store, auth_id="a1", expires_at=200):
    return store.request_authorization(
        auth_id, "p1", "provider-456", "CPT-99213", "Office visit", "policy-789", expires_at
    )


def test_request_authorization(open_store):
    store = open_store(AuthorizationStore, caller="provider-456")
    assert _request(store) is True

    auth = store.get_authorization("a1")
    assert auth.status == AuthorizationStatus.PENDING
    assert auth.authorized_by == "provider-456"
    assert auth.authorized_at == 100
    assert auth.insurance_policy_id == "policy-789"
    assert store.is_patient_authorization("p1", "a1") is True


def test_expired_request_writes_nothing(open_store):
    store = open_store(AuthorizationStore)

    with pytest.raises(LedgerError) as exc_info:
        _request(store, expires_at=90)

    assert exc_info.value.code == AuthorizationError.EXPIRED
    assert exc_info.value.code == 103
    assert store.get_authorization("a1") is None
    assert store.is_patient_authorization("p1", "a1") is False


def test_duplicate_request_rejected(open_store):
    store = open_store(AuthorizationStore)
    _request(store)
    with pytest.raises(LedgerError) as exc_info:
        _request(store, expires_at=500)
    assert exc_info.value.code == 101
    assert store.get_authorization("a1").expires_at == 200


def test_pending_authorization_is_not_valid(open_store):
    store = open_store(AuthorizationStore)
    _request(store)
    assert store.verify_authorization("a1") is False


def test_approve_then_expire(open_store):
    store = open_store(AuthorizationStore)
    _request(store)

    assert store.update_authorization_status("a1", "approved") is True
    assert store.get_authorization("a1").status == AuthorizationStatus.APPROVED
    assert store.verify_authorization("a1") is True
    assert open_store(AuthorizationStore, block_height=201).verify_authorization("a1") is False


@pytest.mark.parametrize("status", ["denied", "completed"])
def test_other_decisions_are_not_valid(open_store, status):
    store = open_store(AuthorizationStore)
    _request(store)
    store.update_authorization_status("a1", status)
    assert store.verify_authorization("a1") is False


@pytest.mark.parametrize("status", ["shipped", "pending", "APPROVED"])
def test_invalid_status_rejected_for_admin(open_store, status):
    store = open_store(AuthorizationStore)
    _request(store)

    with pytest.raises(LedgerError) as exc_info:
        store.update_authorization_status("a1", status)

    assert exc_info.value.code == AuthorizationError.INVALID_STATUS
    assert exc_info.value.code == 104
    assert store.get_authorization("a1").status == AuthorizationStatus.PENDING


def test_status_change_checks_existence_then_admin(open_store):
    outsider = open_store(AuthorizationStore, caller="outsider")

    with pytest.raises(LedgerError) as exc_info:
        outsider.update_authorization_status("a1", "shipped")
    assert exc_info.value.code == AuthorizationError.NOT_FOUND

    _request(outsider)
    with pytest.raises(LedgerError) as exc_info:
        outsider.update_authorization_status("a1", "shipped")
    assert exc_info.value.code == AuthorizationError.UNAUTHORIZED

    with pytest.raises(LedgerError) as exc_info:
        outsider.update_authorization_status("a1", "approved")
    assert exc_info.value.code == AuthorizationError.UNAUTHORIZED
    assert outsider.get_authorization("a1").status == AuthorizationStatus.PENDING


def test_decided_status_can_be_changed_again(open_store):
    store = open_store(AuthorizationStore)
    _request(store)
    store.update_authorization_status("a1", "approved")

    assert store.update_authorization_status("a1", "denied") is True
    assert store.get_authorization("a1").status == AuthorizationStatus.DENIED


def test_extend_authorization(open_store):
    store = open_store(AuthorizationStore)
    _request(store)

    assert store.extend_authorization("a1", 300) is True
    assert store.get_authorization("a1").expires_at == 300


def test_extend_is_admin_only(open_store):
    _request(open_store(AuthorizationStore, caller="provider-456"))

    with pytest.raises(LedgerError) as exc_info:
        open_store(AuthorizationStore, caller="provider-456").extend_authorization("a1", 300)
    assert exc_info.value.code == 100
    assert open_store(AuthorizationStore).get_authorization("a1").expires_at == 200


@pytest.mark.parametrize("new_expiry", [100, 150, 200])
def test_extend_must_move_forward(open_store, new_expiry):
    store = open_store(AuthorizationStore)
    _request(store)

    with pytest.raises(LedgerError) as exc_info:
        store.extend_authorization("a1", new_expiry)
    assert exc_info.value.code == AuthorizationError.EXPIRED
