"""
Ledger tables for the four healthcare record stores.

Each store owns a primary table keyed by a caller-supplied string id and,
except for the patient registry, an append-only (patient_id, record_id)
index. Block heights are plain integers supplied by the host.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Enum,
    Index,
    Integer,
    String,
    Text,
)

from healthledger.models.database import Base

ID_LENGTH = 64
PRINCIPAL_LENGTH = 128


# ---------------------------------------------------------------------------
# Store admins – one mutable admin identity per store
# ---------------------------------------------------------------------------
class StoreAdmin(Base):
    __tablename__ = "store_admins"

    store = Column(String(32), primary_key=True, comment="patients | policies | consents | authorizations")
    admin = Column(String(PRINCIPAL_LENGTH), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


# ---------------------------------------------------------------------------
# Patient – identity registry (no secondary index)
# ---------------------------------------------------------------------------
class PatientRow(Base):
    __tablename__ = "patients"

    patient_id = Column(String(ID_LENGTH), primary_key=True)
    owner = Column(String(PRINCIPAL_LENGTH), nullable=False, comment="Registering identity")
    name = Column(String(128), nullable=False)
    dob = Column(String(32), nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(Integer, nullable=False, comment="Block height at registration")


# ---------------------------------------------------------------------------
# Insurance policy – coverage window in block heights
# ---------------------------------------------------------------------------
class InsurancePolicyRow(Base):
    __tablename__ = "insurance_policies"

    policy_id = Column(String(ID_LENGTH), primary_key=True)
    patient_id = Column(String(ID_LENGTH), nullable=False, comment="Opaque, not checked against patients")
    provider = Column(String(128), nullable=False)
    policy_number = Column(String(64), nullable=False)
    coverage_start = Column(Integer, nullable=False)
    coverage_end = Column(Integer, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_by = Column(String(PRINCIPAL_LENGTH), nullable=False)
    created_at = Column(Integer, nullable=False)


class PatientPolicyRow(Base):
    __tablename__ = "patient_policies"

    patient_id = Column(String(ID_LENGTH), primary_key=True)
    policy_id = Column(String(ID_LENGTH), primary_key=True)
    present = Column(Boolean, default=True, nullable=False)


# ---------------------------------------------------------------------------
# Consent – data-sharing grant with expiry, revocable
# ---------------------------------------------------------------------------
class ConsentRow(Base):
    __tablename__ = "consents"

    consent_id = Column(String(ID_LENGTH), primary_key=True)
    patient_id = Column(String(ID_LENGTH), nullable=False)
    provider_id = Column(String(ID_LENGTH), nullable=False)
    purpose = Column(Text, nullable=False)
    granted_by = Column(String(PRINCIPAL_LENGTH), nullable=False)
    granted_at = Column(Integer, nullable=False)
    expires_at = Column(Integer, nullable=False)
    revoked = Column(Boolean, default=False, nullable=False)


class PatientConsentRow(Base):
    __tablename__ = "patient_consents"

    patient_id = Column(String(ID_LENGTH), primary_key=True)
    consent_id = Column(String(ID_LENGTH), primary_key=True)
    present = Column(Boolean, default=True, nullable=False)


# ---------------------------------------------------------------------------
# Treatment authorization – status machine with expiry
# ---------------------------------------------------------------------------
class AuthorizationRow(Base):
    __tablename__ = "authorizations"

    auth_id = Column(String(ID_LENGTH), primary_key=True)
    patient_id = Column(String(ID_LENGTH), nullable=False)
    provider_id = Column(String(ID_LENGTH), nullable=False)
    treatment_code = Column(String(32), nullable=False)
    description = Column(Text, nullable=False)
    insurance_policy_id = Column(String(ID_LENGTH), nullable=False, comment="Opaque, not checked against policies")
    authorized_by = Column(String(PRINCIPAL_LENGTH), nullable=False)
    authorized_at = Column(Integer, nullable=False)
    expires_at = Column(Integer, nullable=False)
    status = Column(
        Enum("pending", "approved", "denied", "completed", name="authorization_status_enum"),
        default="pending",
        nullable=False,
    )


class PatientAuthorizationRow(Base):
    __tablename__ = "patient_authorizations"

    patient_id = Column(String(ID_LENGTH), primary_key=True)
    auth_id = Column(String(ID_LENGTH), primary_key=True)
    present = Column(Boolean, default=True, nullable=False)


# ---------------------------------------------------------------------------
# Audit Log – immutable compliance trail
# ---------------------------------------------------------------------------
class AuditLog(Base):
    __tablename__ = "audit_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    actor = Column(String(PRINCIPAL_LENGTH), nullable=False, comment="Caller identity")
    action = Column(String(64), nullable=False, comment="register | update | revoke | ...")
    resource_type = Column(String(64), nullable=False)
    resource_id = Column(String(ID_LENGTH), nullable=False)
    block_height = Column(Integer, nullable=False)
    detail = Column(JSON, comment="Changed fields or context for the action")
    timestamp = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)

    __table_args__ = (
        Index("ix_audit_timestamp", "timestamp"),
        Index("ix_audit_resource", "resource_type", "resource_id"),
    )
