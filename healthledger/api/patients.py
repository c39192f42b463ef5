"""Patient registry endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from healthledger.api.deps import committed, get_patient_registry
from healthledger.schemas.api import (
    AdminResponse,
    AdminTransfer,
    PatientRegistration,
    PatientUpdate,
    TxResult,
)
from healthledger.schemas.records import Patient
from healthledger.services.patients import PatientRegistry

router = APIRouter(tags=["patients"])


@router.get("/admin/patients", response_model=AdminResponse)
def get_admin(store: PatientRegistry = Depends(get_patient_registry)):
    return AdminResponse(store=store.store_name, admin=store.admin)


@router.post("/admin/patients", response_model=TxResult)
def transfer_admin(body: AdminTransfer, store: PatientRegistry = Depends(get_patient_registry)):
    store.transfer_admin(body.new_admin)
    return committed(store)


@router.post("/patients", response_model=TxResult)
def register_patient(
    body: PatientRegistration, store: PatientRegistry = Depends(get_patient_registry)
):
    """Register a patient; the caller becomes its owner."""
    store.register_patient(body.patient_id, body.name, body.dob)
    return committed(store)


@router.get("/patients/{patient_id}", response_model=Patient | None)
def get_patient(patient_id: str, store: PatientRegistry = Depends(get_patient_registry)):
    return store.get_patient(patient_id)


@router.put("/patients/{patient_id}", response_model=TxResult)
def update_patient(
    patient_id: str, body: PatientUpdate, store: PatientRegistry = Depends(get_patient_registry)
):
    store.update_patient(patient_id, body.name, body.dob)
    return committed(store)


@router.post("/patients/{patient_id}/deactivate", response_model=TxResult)
def deactivate_patient(patient_id: str, store: PatientRegistry = Depends(get_patient_registry)):
    store.deactivate_patient(patient_id)
    return committed(store)


@router.post("/patients/{patient_id}/reactivate", response_model=TxResult)
def reactivate_patient(patient_id: str, store: PatientRegistry = Depends(get_patient_registry)):
    store.reactivate_patient(patient_id)
    return committed(store)
