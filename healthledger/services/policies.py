"""Insurance policy store."""

from __future__ import annotations

from healthledger.models.ledger import InsurancePolicyRow, PatientPolicyRow
from healthledger.schemas.records import InsurancePolicy
from healthledger.services.errors import PolicyError
from healthledger.services.store import IndexedRecordStore
from healthledger.services.validity import policy_covers


class InsurancePolicyStore(IndexedRecordStore[InsurancePolicy]):
    """Admin-managed insurance policies with a block-height coverage window."""

    store_name = "policies"
    resource_type = "InsurancePolicy"
    id_field = "policy_id"
    row_model = InsurancePolicyRow
    snapshot_model = InsurancePolicy
    index_model = PatientPolicyRow
    errors = PolicyError

    def add_insurance_policy(
        self,
        policy_id: str,
        patient_id: str,
        provider: str,
        policy_number: str,
        coverage_start: int,
        coverage_end: int,
    ) -> bool:
        self._authorize(self._is_admin(), "add", policy_id)
        self._ensure_absent(policy_id, "add")
        self._check_window(coverage_start, coverage_end, "add", policy_id)
        policy = InsurancePolicy(
            policy_id=policy_id,
            patient_id=patient_id,
            provider=provider,
            policy_number=policy_number,
            coverage_start=coverage_start,
            coverage_end=coverage_end,
            active=True,
            created_by=self.ctx.caller,
            created_at=self.ctx.block_height,
        )
        return self._insert(policy, patient_id, "add")

    def get_insurance_policy(self, policy_id: str) -> InsurancePolicy | None:
        return self._find(policy_id)

    def is_patient_policy(self, patient_id: str, policy_id: str) -> bool:
        return self.subject_owns(patient_id, policy_id)

    def verify_coverage(self, policy_id: str) -> bool:
        policy = self._find(policy_id)
        return policy is not None and policy_covers(policy, self.ctx.block_height)

    def update_insurance_policy(
        self,
        policy_id: str,
        provider: str,
        policy_number: str,
        coverage_start: int,
        coverage_end: int,
    ) -> bool:
        row, policy = self._existing(policy_id, "update")
        self._authorize(self._is_admin(), "update", policy_id)
        self._check_window(coverage_start, coverage_end, "update", policy_id)
        return self._merge(
            row,
            policy,
            "update",
            provider=provider,
            policy_number=policy_number,
            coverage_start=coverage_start,
            coverage_end=coverage_end,
        )

    def deactivate_policy(self, policy_id: str) -> bool:
        return self._set_active(policy_id, False, "deactivate")

    def reactivate_policy(self, policy_id: str) -> bool:
        return self._set_active(policy_id, True, "reactivate")

    def _set_active(self, policy_id: str, active: bool, action: str) -> bool:
        row, policy = self._existing(policy_id, action)
        self._authorize(self._is_admin(), action, policy_id)
        return self._merge(row, policy, action, active=active)

    def _check_window(self, start: int, end: int, action: str, policy_id: str) -> None:
        if start >= end:
            self._fail("INVALID_WINDOW", action, policy_id)
