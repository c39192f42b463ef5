"""Treatment authorization endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from healthledger.api.deps import committed, get_authorization_store
from healthledger.schemas.api import (
    AdminResponse,
    AdminTransfer,
    AuthorizationRequest,
    BoolResult,
    ExpiryExtension,
    StatusChange,
    TxResult,
)
from healthledger.schemas.records import Authorization
from healthledger.services.authorizations import AuthorizationStore

router = APIRouter(tags=["authorizations"])


@router.get("/admin/authorizations", response_model=AdminResponse)
def get_admin(store: AuthorizationStore = Depends(get_authorization_store)):
    return AdminResponse(store=store.store_name, admin=store.admin)


@router.post("/admin/authorizations", response_model=TxResult)
def transfer_admin(body: AdminTransfer, store: AuthorizationStore = Depends(get_authorization_store)):
    store.transfer_admin(body.new_admin)
    return committed(store)


@router.post("/authorizations", response_model=TxResult)
def request_authorization(
    body: AuthorizationRequest, store: AuthorizationStore = Depends(get_authorization_store)
):
    """Open a pending authorization request."""
    store.request_authorization(
        body.auth_id,
        body.patient_id,
        body.provider_id,
        body.treatment_code,
        body.description,
        body.insurance_policy_id,
        body.expires_at,
    )
    return committed(store)


@router.get("/authorizations/{auth_id}", response_model=Authorization | None)
def get_authorization(auth_id: str, store: AuthorizationStore = Depends(get_authorization_store)):
    return store.get_authorization(auth_id)


@router.post("/authorizations/{auth_id}/status", response_model=TxResult)
def update_authorization_status(
    auth_id: str, body: StatusChange, store: AuthorizationStore = Depends(get_authorization_store)
):
    store.update_authorization_status(auth_id, body.new_status)
    return committed(store)


@router.get("/authorizations/{auth_id}/verify", response_model=BoolResult)
def verify_authorization(auth_id: str, store: AuthorizationStore = Depends(get_authorization_store)):
    """True only for approved authorizations that have not expired."""
    return BoolResult(value=store.verify_authorization(auth_id))


@router.post("/authorizations/{auth_id}/extend", response_model=TxResult)
def extend_authorization(
    auth_id: str, body: ExpiryExtension, store: AuthorizationStore = Depends(get_authorization_store)
):
    store.extend_authorization(auth_id, body.new_expiry)
    return committed(store)


@router.get("/patients/{patient_id}/authorizations/{auth_id}", response_model=BoolResult)
def is_patient_authorization(
    patient_id: str, auth_id: str, store: AuthorizationStore = Depends(get_authorization_store)
):
    return BoolResult(value=store.is_patient_authorization(patient_id, auth_id))
