"""Data-sharing consent store."""

from __future__ import annotations

from healthledger.models.ledger import ConsentRow, PatientConsentRow
from healthledger.schemas.records import Consent
from healthledger.services.errors import ConsentError
from healthledger.services.store import IndexedRecordStore
from healthledger.services.validity import consent_is_valid, extends_forward


class ConsentStore(IndexedRecordStore[Consent]):
    """
    Consents granted for a patient to a provider until an expiry height.

    Revocation is one-way. The admin or the granter may revoke, but only the
    granter may extend, and a revoked consent cannot be extended at all.
    """

    store_name = "consents"
    resource_type = "Consent"
    id_field = "consent_id"
    row_model = ConsentRow
    snapshot_model = Consent
    index_model = PatientConsentRow
    errors = ConsentError

    def grant_consent(
        self,
        consent_id: str,
        patient_id: str,
        provider_id: str,
        purpose: str,
        expires_at: int,
    ) -> bool:
        self._ensure_absent(consent_id, "grant")
        if expires_at <= self.ctx.block_height:
            self._fail("EXPIRED", "grant", consent_id)
        consent = Consent(
            consent_id=consent_id,
            patient_id=patient_id,
            provider_id=provider_id,
            purpose=purpose,
            granted_by=self.ctx.caller,
            granted_at=self.ctx.block_height,
            expires_at=expires_at,
            revoked=False,
        )
        return self._insert(consent, patient_id, "grant")

    def get_consent(self, consent_id: str) -> Consent | None:
        return self._find(consent_id)

    def is_patient_consent(self, patient_id: str, consent_id: str) -> bool:
        return self.subject_owns(patient_id, consent_id)

    def verify_consent(self, consent_id: str) -> bool:
        consent = self._find(consent_id)
        return consent is not None and consent_is_valid(consent, self.ctx.block_height)

    def revoke_consent(self, consent_id: str) -> bool:
        row, consent = self._existing(consent_id, "revoke")
        allowed = self._is_admin() or self.ctx.caller == consent.granted_by
        self._authorize(allowed, "revoke", consent_id)
        return self._merge(row, consent, "revoke", revoked=True)

    def extend_consent(self, consent_id: str, new_expiry: int) -> bool:
        row, consent = self._existing(consent_id, "extend")
        self._authorize(self.ctx.caller == consent.granted_by, "extend", consent_id)
        if consent.revoked:
            self._fail("REVOKED", "extend", consent_id)
        if not extends_forward(new_expiry, consent.expires_at, self.ctx.block_height):
            self._fail("EXPIRED", "extend", consent_id)
        return self._merge(row, consent, "extend", expires_at=new_expiry)
