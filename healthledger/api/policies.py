"""Insurance policy endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from healthledger.api.deps import committed, get_policy_store
from healthledger.schemas.api import (
    AdminResponse,
    AdminTransfer,
    BoolResult,
    PolicyCreate,
    PolicyTerms,
    TxResult,
)
from healthledger.schemas.records import InsurancePolicy
from healthledger.services.policies import InsurancePolicyStore

router = APIRouter(tags=["policies"])


@router.get("/admin/policies", response_model=AdminResponse)
def get_admin(store: InsurancePolicyStore = Depends(get_policy_store)):
    return AdminResponse(store=store.store_name, admin=store.admin)


@router.post("/admin/policies", response_model=TxResult)
def transfer_admin(body: AdminTransfer, store: InsurancePolicyStore = Depends(get_policy_store)):
    store.transfer_admin(body.new_admin)
    return committed(store)


@router.post("/policies", response_model=TxResult)
def add_insurance_policy(body: PolicyCreate, store: InsurancePolicyStore = Depends(get_policy_store)):
    """Admin-only: record a policy with its coverage window."""
    store.add_insurance_policy(
        body.policy_id,
        body.patient_id,
        body.provider,
        body.policy_number,
        body.coverage_start,
        body.coverage_end,
    )
    return committed(store)


@router.get("/policies/{policy_id}", response_model=InsurancePolicy | None)
def get_insurance_policy(policy_id: str, store: InsurancePolicyStore = Depends(get_policy_store)):
    return store.get_insurance_policy(policy_id)


@router.put("/policies/{policy_id}", response_model=TxResult)
def update_insurance_policy(
    policy_id: str, body: PolicyTerms, store: InsurancePolicyStore = Depends(get_policy_store)
):
    store.update_insurance_policy(
        policy_id, body.provider, body.policy_number, body.coverage_start, body.coverage_end
    )
    return committed(store)


@router.get("/policies/{policy_id}/coverage", response_model=BoolResult)
def verify_coverage(policy_id: str, store: InsurancePolicyStore = Depends(get_policy_store)):
    """True while the policy is active and coverage has not ended."""
    return BoolResult(value=store.verify_coverage(policy_id))


@router.post("/policies/{policy_id}/deactivate", response_model=TxResult)
def deactivate_policy(policy_id: str, store: InsurancePolicyStore = Depends(get_policy_store)):
    store.deactivate_policy(policy_id)
    return committed(store)


@router.post("/policies/{policy_id}/reactivate", response_model=TxResult)
def reactivate_policy(policy_id: str, store: InsurancePolicyStore = Depends(get_policy_store)):
    store.reactivate_policy(policy_id)
    return committed(store)


@router.get("/patients/{patient_id}/policies/{policy_id}", response_model=BoolResult)
def is_patient_policy(
    patient_id: str, policy_id: str, store: InsurancePolicyStore = Depends(get_policy_store)
):
    return BoolResult(value=store.is_patient_policy(patient_id, policy_id))
