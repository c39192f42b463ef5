"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

RecordId = Annotated[str, Field(min_length=1, max_length=64)]


# ---------------------------------------------------------------------------
# Tagged results
# ---------------------------------------------------------------------------

class TxResult(BaseModel):
    """Outcome of a mutation: ok with no payload, or err with a numeric code."""
    type: Literal["ok", "err"] = "ok"
    value: bool | int = True
    error: str | None = None


class BoolResult(BaseModel):
    value: bool


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------

class AdminTransfer(BaseModel):
    new_admin: str = Field(..., min_length=1, max_length=128)


class AdminResponse(BaseModel):
    store: str
    admin: str


# ---------------------------------------------------------------------------
# Patients
# ---------------------------------------------------------------------------

class PatientRegistration(BaseModel):
    patient_id: RecordId
    name: str = Field(..., min_length=1, max_length=128)
    dob: str = Field(..., min_length=1, max_length=32)


class PatientUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    dob: str = Field(..., min_length=1, max_length=32)


# ---------------------------------------------------------------------------
# Insurance policies
# ---------------------------------------------------------------------------

class PolicyTerms(BaseModel):
    provider: str = Field(..., min_length=1, max_length=128)
    policy_number: str = Field(..., min_length=1, max_length=64)
    coverage_start: int = Field(..., ge=0)
    coverage_end: int = Field(..., ge=0)


class PolicyCreate(PolicyTerms):
    policy_id: RecordId
    patient_id: RecordId


# ---------------------------------------------------------------------------
# Consents
# ---------------------------------------------------------------------------

class ConsentGrant(BaseModel):
    consent_id: RecordId
    patient_id: RecordId
    provider_id: RecordId
    purpose: str = Field(..., min_length=1)
    expires_at: int = Field(..., ge=0)


class ExpiryExtension(BaseModel):
    new_expiry: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Treatment authorizations
# ---------------------------------------------------------------------------

class AuthorizationRequest(BaseModel):
    auth_id: RecordId
    patient_id: RecordId
    provider_id: RecordId
    treatment_code: str = Field(..., min_length=1, max_length=32)
    description: str = Field(..., min_length=1)
    insurance_policy_id: RecordId
    expires_at: int = Field(..., ge=0)


class StatusChange(BaseModel):
    # Free-form so that unknown statuses reach the store and get code 104
    new_status: str = Field(..., min_length=1, max_length=32)


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: str = "healthy"
    environment: str
    database: str = "connected"
