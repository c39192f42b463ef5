"""Tests for per-store admin control."""

import pytest

from healthledger.schemas.records import CallContext
from healthledger.services.consents import ConsentStore
from healthledger.services.errors import LedgerError, PatientError
from healthledger.services.patients import PatientRegistry
from healthledger.services.policies import InsurancePolicyStore


def test_first_caller_becomes_admin_without_configured_admin(db):
    store = PatientRegistry(db, CallContext(caller="deployer", block_height=1))
    assert store.admin == "deployer"

    # Later callers do not take over the existing admin slot
    later = PatientRegistry(db, CallContext(caller="someone-else", block_height=2))
    assert later.admin == "deployer"


def test_configured_admin_wins_over_caller(open_store):
    store = open_store(PatientRegistry, caller="patient-1")
    assert store.admin == "admin"
    assert store.access.is_admin("admin")
    assert not store.access.is_admin("patient-1")


def test_transfer_admin(open_store):
    store = open_store(PatientRegistry)
    assert store.transfer_admin("new-admin") is True
    assert open_store(PatientRegistry, caller="anyone").admin == "new-admin"


def test_transfer_admin_rejects_non_admin(open_store):
    store = open_store(PatientRegistry, caller="intruder")
    with pytest.raises(LedgerError) as exc_info:
        store.transfer_admin("intruder")

    assert exc_info.value.code == PatientError.UNAUTHORIZED
    assert exc_info.value.code == 100
    assert open_store(PatientRegistry).admin == "admin"


def test_old_admin_loses_rights_after_transfer(open_store):
    open_store(InsurancePolicyStore).transfer_admin("new-admin")

    with pytest.raises(LedgerError) as exc_info:
        open_store(InsurancePolicyStore).add_insurance_policy("pol-1", "p1", "Acme", "N-1", 1, 2)
    assert exc_info.value.code == 100

    assert open_store(InsurancePolicyStore, caller="new-admin").add_insurance_policy(
        "pol-1", "p1", "Acme", "N-1", 1, 2
    )


def test_admins_are_independent_per_store(open_store):
    open_store(PatientRegistry).transfer_admin("patients-admin")

    assert open_store(PatientRegistry).admin == "patients-admin"
    assert open_store(ConsentStore).admin == "admin"
