"""Treatment authorization store."""

from __future__ import annotations

from healthledger.models.ledger import AuthorizationRow, PatientAuthorizationRow
from healthledger.schemas.records import STATUS_TARGETS, Authorization, AuthorizationStatus
from healthledger.services.errors import AuthorizationError
from healthledger.services.store import IndexedRecordStore
from healthledger.services.validity import authorization_is_valid, extends_forward


class AuthorizationStore(IndexedRecordStore[Authorization]):
    """
    Treatment authorizations moving from pending to approved, denied or
    completed under admin control.

    Re-invoking a status change on a decided authorization is accepted; the
    only rule is that the target is one of the three decision states.
    """

    store_name = "authorizations"
    resource_type = "Authorization"
    id_field = "auth_id"
    row_model = AuthorizationRow
    snapshot_model = Authorization
    index_model = PatientAuthorizationRow
    errors = AuthorizationError

    def request_authorization(
        self,
        auth_id: str,
        patient_id: str,
        provider_id: str,
        treatment_code: str,
        description: str,
        insurance_policy_id: str,
        expires_at: int,
    ) -> bool:
        self._ensure_absent(auth_id, "request")
        if expires_at <= self.ctx.block_height:
            self._fail("EXPIRED", "request", auth_id)
        auth = Authorization(
            auth_id=auth_id,
            patient_id=patient_id,
            provider_id=provider_id,
            treatment_code=treatment_code,
            description=description,
            insurance_policy_id=insurance_policy_id,
            authorized_by=self.ctx.caller,
            authorized_at=self.ctx.block_height,
            expires_at=expires_at,
            status=AuthorizationStatus.PENDING,
        )
        return self._insert(auth, patient_id, "request")

    def get_authorization(self, auth_id: str) -> Authorization | None:
        return self._find(auth_id)

    def is_patient_authorization(self, patient_id: str, auth_id: str) -> bool:
        return self.subject_owns(patient_id, auth_id)

    def update_authorization_status(self, auth_id: str, new_status: str) -> bool:
        row, auth = self._existing(auth_id, "set_status")
        self._authorize(self._is_admin(), "set_status", auth_id)
        try:
            target = AuthorizationStatus(new_status)
        except ValueError:
            target = None
        if target not in STATUS_TARGETS:
            self._fail("INVALID_STATUS", "set_status", auth_id)
        return self._merge(row, auth, "set_status", status=target)

    def verify_authorization(self, auth_id: str) -> bool:
        auth = self._find(auth_id)
        return auth is not None and authorization_is_valid(auth, self.ctx.block_height)

    def extend_authorization(self, auth_id: str, new_expiry: int) -> bool:
        row, auth = self._existing(auth_id, "extend")
        self._authorize(self._is_admin(), "extend", auth_id)
        if not extends_forward(new_expiry, auth.expires_at, self.ctx.block_height):
            self._fail("EXPIRED", "extend", auth_id)
        return self._merge(row, auth, "extend", expires_at=new_expiry)
