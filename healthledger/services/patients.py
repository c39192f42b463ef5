"""Patient identity registry."""

from __future__ import annotations

from healthledger.models.ledger import PatientRow
from healthledger.schemas.records import Patient
from healthledger.services.errors import PatientError
from healthledger.services.store import RecordStore


class PatientRegistry(RecordStore[Patient]):
    """
    Registers patient identities.

    Anyone may register; the registering identity becomes the owner. The
    owner or the admin may update or deactivate, only the admin reactivates.
    There is no validity query: read ``active`` from the record.
    """

    store_name = "patients"
    resource_type = "Patient"
    id_field = "patient_id"
    row_model = PatientRow
    snapshot_model = Patient
    errors = PatientError

    def register_patient(self, patient_id: str, name: str, dob: str) -> bool:
        self._ensure_absent(patient_id, "register", code="ALREADY_REGISTERED")
        patient = Patient(
            patient_id=patient_id,
            owner=self.ctx.caller,
            name=name,
            dob=dob,
            active=True,
            created_at=self.ctx.block_height,
        )
        return self._insert(patient, None, "register")

    def get_patient(self, patient_id: str) -> Patient | None:
        return self._find(patient_id)

    def update_patient(self, patient_id: str, name: str, dob: str) -> bool:
        row, patient = self._existing(patient_id, "update")
        self._authorize(self._is_owner_or_admin(patient), "update", patient_id)
        return self._merge(row, patient, "update", name=name, dob=dob)

    def deactivate_patient(self, patient_id: str) -> bool:
        row, patient = self._existing(patient_id, "deactivate")
        self._authorize(self._is_owner_or_admin(patient), "deactivate", patient_id)
        return self._merge(row, patient, "deactivate", active=False)

    def reactivate_patient(self, patient_id: str) -> bool:
        row, patient = self._existing(patient_id, "reactivate")
        self._authorize(self._is_admin(), "reactivate", patient_id)
        return self._merge(row, patient, "reactivate", active=True)

    def _is_owner_or_admin(self, patient: Patient) -> bool:
        return self._is_admin() or self.ctx.caller == patient.owner
