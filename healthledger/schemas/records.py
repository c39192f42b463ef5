"""
Immutable record snapshots returned by the stores.

Stores never hand out ORM rows. Every read builds a frozen snapshot, and every
update derives a new snapshot from the old one before writing it back.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"
    COMPLETED = "completed"


# Pending is initial-only and never the target of an explicit transition
STATUS_TARGETS = frozenset(
    {AuthorizationStatus.APPROVED, AuthorizationStatus.DENIED, AuthorizationStatus.COMPLETED}
)


class CallContext(BaseModel):
    """Caller identity and current block height supplied by the host."""
    model_config = ConfigDict(frozen=True)

    caller: str = Field(..., min_length=1)
    block_height: int = Field(..., ge=0)


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)


class Patient(Snapshot):
    patient_id: str
    owner: str
    name: str
    dob: str
    active: bool
    created_at: int


class InsurancePolicy(Snapshot):
    policy_id: str
    patient_id: str
    provider: str
    policy_number: str
    coverage_start: int
    coverage_end: int
    active: bool
    created_by: str
    created_at: int


class Consent(Snapshot):
    consent_id: str
    patient_id: str
    provider_id: str
    purpose: str
    granted_by: str
    granted_at: int
    expires_at: int
    revoked: bool


class Authorization(Snapshot):
    auth_id: str
    patient_id: str
    provider_id: str
    treatment_code: str
    description: str
    insurance_policy_id: str
    authorized_by: str
    authorized_at: int
    expires_at: int
    status: AuthorizationStatus
