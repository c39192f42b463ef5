"""
Generic keyed record store.

Every store follows the same shape:
- a primary table keyed by a caller-supplied string id
- an append-only (patient_id, record_id) index, for IndexedRecordStore only
- an AccessController with a single admin
- immutable snapshots for reads, merge-updates for writes

Subclasses set the class attributes and implement their domain operations
on top of the helpers here. Validation always completes before the first
write, so a rejected call leaves no partial state behind.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, ClassVar, Generic, NoReturn, TypeVar

from sqlalchemy.orm import Session

from healthledger.models.database import Base
from healthledger.schemas.records import CallContext, Snapshot
from healthledger.services.access import AccessController
from healthledger.services.audit import log_action
from healthledger.services.errors import LedgerError

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Snapshot)


class RecordStore(Generic[S]):
    store_name: ClassVar[str]
    resource_type: ClassVar[str]
    id_field: ClassVar[str]
    row_model: ClassVar[type[Base]]
    snapshot_model: ClassVar[type[Snapshot]]
    index_model: ClassVar[type[Base] | None] = None
    errors: ClassVar[type[IntEnum]]

    def __init__(self, db: Session, ctx: CallContext, initial_admin: str | None = None):
        self.db = db
        self.ctx = ctx
        self.access = AccessController(
            db,
            self.store_name,
            initial_admin or ctx.caller,
            self.errors["UNAUTHORIZED"],
        )

    # -- access --------------------------------------------------------------

    @property
    def admin(self) -> str:
        return self.access.admin

    def transfer_admin(self, new_admin: str) -> bool:
        try:
            self.access.transfer_admin(new_admin, self.ctx.caller)
        except LedgerError as exc:
            self._reject(exc, "transfer_admin", self.store_name)
        self._audit("transfer_admin", self.store_name, {"admin": new_admin})
        return True

    # -- reads ---------------------------------------------------------------

    def _find(self, record_id: str) -> S | None:
        row = self.db.get(self.row_model, record_id)
        if row is None:
            return None
        return self.snapshot_model.model_validate(row)

    # -- checks --------------------------------------------------------------

    def _fail(self, name: str, action: str, record_id: str) -> NoReturn:
        self._reject(LedgerError(self.errors[name], self.store_name), action, record_id)

    def _reject(self, exc: LedgerError, action: str, record_id: str) -> NoReturn:
        logger.warning(
            "Rejected %s on %s/%s by %s: %s",
            action, self.resource_type, record_id, self.ctx.caller, exc,
        )
        raise exc

    def _existing(self, record_id: str, action: str) -> tuple[Any, S]:
        row = self.db.get(self.row_model, record_id)
        if row is None:
            self._fail("NOT_FOUND", action, record_id)
        return row, self.snapshot_model.model_validate(row)

    def _ensure_absent(self, record_id: str, action: str, code: str = "ALREADY_EXISTS") -> None:
        if self.db.get(self.row_model, record_id) is not None:
            self._fail(code, action, record_id)

    def _authorize(self, allowed: bool, action: str, record_id: str) -> None:
        if not allowed:
            self._fail("UNAUTHORIZED", action, record_id)

    def _is_admin(self) -> bool:
        return self.access.is_admin(self.ctx.caller)

    # -- writes --------------------------------------------------------------

    def _insert(self, record: S, patient_id: str | None, action: str) -> bool:
        """Write the record and its index entry as one unit."""
        record_id = getattr(record, self.id_field)
        self.db.add(self.row_model(**record.model_dump(mode="json")))
        if self.index_model is not None:
            self.db.add(
                self.index_model(
                    **{"patient_id": patient_id, self.id_field: record_id, "present": True}
                )
            )
        self.db.flush()
        self._audit(action, record_id, record.model_dump(mode="json"))
        return True

    def _merge(self, row: Any, current: S, action: str, **changes: Any) -> bool:
        """Derive a new snapshot with only ``changes`` replaced and store it."""
        updated = current.model_copy(update=changes)
        values = updated.model_dump(mode="json")
        for name in changes:
            setattr(row, name, values[name])
        self.db.flush()
        self._audit(action, getattr(current, self.id_field), {k: values[k] for k in changes})
        return True

    def _audit(self, action: str, record_id: str, detail: dict[str, Any] | None) -> None:
        log_action(
            self.db,
            actor=self.ctx.caller,
            action=action,
            resource_type=self.resource_type,
            resource_id=record_id,
            block_height=self.ctx.block_height,
            detail=detail,
        )


class IndexedRecordStore(RecordStore[S]):
    """A store whose records are also indexed by the patient they belong to."""

    index_model: ClassVar[type[Base]]

    def subject_owns(self, patient_id: str, record_id: str) -> bool:
        """Existence check against the secondary index; False when absent."""
        entry = self.db.get(self.index_model, (patient_id, record_id))
        return bool(entry is not None and entry.present)
