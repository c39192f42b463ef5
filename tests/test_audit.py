"""Tests for the mutation audit trail."""

import pytest

from healthledger.services.audit import audit_trail
from healthledger.services.consents import ConsentStore
from healthledger.services.errors import LedgerError
from healthledger.services.patients import PatientRegistry


def test_successful_mutations_are_audited(open_store, db):
    store = open_store(ConsentStore, caller="patient-1")
    store.grant_consent("c1", "p1", "dr", "treatment", 200)
    open_store(ConsentStore, caller="patient-1", block_height=120).extend_consent("c1", 300)

    entries = audit_trail(db, "Consent", "c1")
    assert [e.action for e in entries] == ["grant", "extend"]
    assert entries[0].actor == "patient-1"
    assert entries[0].detail["expires_at"] == 200
    assert entries[1].block_height == 120
    assert entries[1].detail == {"expires_at": 300}


def test_rejected_mutations_leave_no_audit_entry(open_store, db):
    open_store(PatientRegistry).register_patient("patient-1", "Jane", "1990-01-15")

    with pytest.raises(LedgerError):
        open_store(PatientRegistry, caller="stranger").update_patient("patient-1", "X", "Y")

    assert [e.action for e in audit_trail(db, "Patient", "patient-1")] == ["register"]


def test_admin_transfer_is_audited(open_store, db):
    open_store(PatientRegistry).transfer_admin("new-admin")
    entries = audit_trail(db, "Patient", "patients")
    assert entries[-1].action == "transfer_admin"
    assert entries[-1].detail == {"admin": "new-admin"}
