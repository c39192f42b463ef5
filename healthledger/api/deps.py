"""Request-scoped dependencies shared by the store routers."""

from __future__ import annotations

from typing import TypeVar

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from healthledger.config import settings
from healthledger.models.database import get_db
from healthledger.schemas.api import TxResult
from healthledger.schemas.records import CallContext
from healthledger.services.authorizations import AuthorizationStore
from healthledger.services.consents import ConsentStore
from healthledger.services.patients import PatientRegistry
from healthledger.services.policies import InsurancePolicyStore
from healthledger.services.store import RecordStore

StoreT = TypeVar("StoreT", bound=RecordStore)


def get_call_context(
    x_caller: str = Header(..., min_length=1, max_length=128),
    x_block_height: int = Header(..., ge=0),
) -> CallContext:
    """The host supplies caller identity and the current block height per request."""
    return CallContext(caller=x_caller, block_height=x_block_height)


def _open(store_cls: type[StoreT], db: Session, ctx: CallContext) -> StoreT:
    store = store_cls(db, ctx, settings.LEDGER_ADMIN or None)
    # Persist the admin row if this request was the store's first use
    db.commit()
    return store


def get_patient_registry(
    db: Session = Depends(get_db), ctx: CallContext = Depends(get_call_context)
) -> PatientRegistry:
    return _open(PatientRegistry, db, ctx)


def get_policy_store(
    db: Session = Depends(get_db), ctx: CallContext = Depends(get_call_context)
) -> InsurancePolicyStore:
    return _open(InsurancePolicyStore, db, ctx)


def get_consent_store(
    db: Session = Depends(get_db), ctx: CallContext = Depends(get_call_context)
) -> ConsentStore:
    return _open(ConsentStore, db, ctx)


def get_authorization_store(
    db: Session = Depends(get_db), ctx: CallContext = Depends(get_call_context)
) -> AuthorizationStore:
    return _open(AuthorizationStore, db, ctx)


def committed(store: RecordStore) -> TxResult:
    """Commit the store's transaction and return the ok marker."""
    store.db.commit()
    return TxResult()
