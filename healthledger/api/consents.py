"""Consent endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from healthledger.api.deps import committed, get_consent_store
from healthledger.schemas.api import (
    AdminResponse,
    AdminTransfer,
    BoolResult,
    ConsentGrant,
    ExpiryExtension,
    TxResult,
)
from healthledger.schemas.records import Consent
from healthledger.services.consents import ConsentStore

router = APIRouter(tags=["consents"])


@router.get("/admin/consents", response_model=AdminResponse)
def get_admin(store: ConsentStore = Depends(get_consent_store)):
    return AdminResponse(store=store.store_name, admin=store.admin)


@router.post("/admin/consents", response_model=TxResult)
def transfer_admin(body: AdminTransfer, store: ConsentStore = Depends(get_consent_store)):
    store.transfer_admin(body.new_admin)
    return committed(store)


@router.post("/consents", response_model=TxResult)
def grant_consent(body: ConsentGrant, store: ConsentStore = Depends(get_consent_store)):
    """Grant consent; the caller is recorded as granter."""
    store.grant_consent(
        body.consent_id, body.patient_id, body.provider_id, body.purpose, body.expires_at
    )
    return committed(store)


@router.get("/consents/{consent_id}", response_model=Consent | None)
def get_consent(consent_id: str, store: ConsentStore = Depends(get_consent_store)):
    return store.get_consent(consent_id)


@router.get("/consents/{consent_id}/verify", response_model=BoolResult)
def verify_consent(consent_id: str, store: ConsentStore = Depends(get_consent_store)):
    return BoolResult(value=store.verify_consent(consent_id))


@router.post("/consents/{consent_id}/revoke", response_model=TxResult)
def revoke_consent(consent_id: str, store: ConsentStore = Depends(get_consent_store)):
    store.revoke_consent(consent_id)
    return committed(store)


@router.post("/consents/{consent_id}/extend", response_model=TxResult)
def extend_consent(
    consent_id: str, body: ExpiryExtension, store: ConsentStore = Depends(get_consent_store)
):
    store.extend_consent(consent_id, body.new_expiry)
    return committed(store)


@router.get("/patients/{patient_id}/consents/{consent_id}", response_model=BoolResult)
def is_patient_consent(
    patient_id: str, consent_id: str, store: ConsentStore = Depends(get_consent_store)
):
    return BoolResult(value=store.is_patient_consent(patient_id, consent_id))
