"""Tests for the pure validity evaluators – no database required."""

from healthledger.schemas.records import (
    Authorization,
    AuthorizationStatus,
    Consent,
    InsurancePolicy,
)
from healthledger.services.validity import (
    authorization_is_valid,
    consent_is_valid,
    extends_forward,
    policy_covers,
)


def _policy(active=True, coverage_end=200):
    return InsurancePolicy(
        policy_id="pol-1",
        patient_id="p1",
        provider="Acme",
        policy_number="A-1",
        coverage_start=10,
        coverage_end=coverage_end,
        active=active,
        created_by="admin",
        created_at=1,
    )


def test_policy_coverage_window():
    policy = _policy()
    assert policy_covers(policy, 100)
    assert policy_covers(policy, 200)
    assert not policy_covers(policy, 201)


def test_inactive_policy_never_covers():
    policy = _policy(active=False)
    assert not any(policy_covers(policy, h) for h in (0, 100, 200))


def test_consent_validity():
    consent = Consent(
        consent_id="c1",
        patient_id="p1",
        provider_id="dr",
        purpose="treatment",
        granted_by="p1",
        granted_at=1,
        expires_at=50,
        revoked=False,
    )
    assert consent_is_valid(consent, 50)
    assert not consent_is_valid(consent, 51)
    assert not consent_is_valid(consent.model_copy(update={"revoked": True}), 10)


def test_authorization_validity_requires_approval():
    auth = Authorization(
        auth_id="a1",
        patient_id="p1",
        provider_id="dr",
        treatment_code="T1",
        description="x",
        insurance_policy_id="pol-1",
        authorized_by="dr",
        authorized_at=1,
        expires_at=50,
        status="pending",
    )
    assert not authorization_is_valid(auth, 10)
    approved = auth.model_copy(update={"status": AuthorizationStatus.APPROVED})
    assert authorization_is_valid(approved, 50)
    assert not authorization_is_valid(approved, 51)


def test_extension_must_pass_both_clock_and_stored_expiry():
    assert extends_forward(300, current_expiry=200, block_height=100)
    assert not extends_forward(200, current_expiry=200, block_height=100)
    assert not extends_forward(150, current_expiry=100, block_height=150)
