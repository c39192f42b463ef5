"""Single-admin access control, one admin identity per store."""

from __future__ import annotations

import logging
from enum import IntEnum

from sqlalchemy.orm import Session

from healthledger.models.ledger import StoreAdmin
from healthledger.services.errors import LedgerError

logger = logging.getLogger(__name__)


class AccessController:
    """
    Holds exactly one admin identity for a store.

    The admin row is created on first use with ``initial_admin`` and after
    that only changes through ``transfer_admin``. There is no recovery path
    for a lost admin identity.
    """

    def __init__(self, db: Session, store: str, initial_admin: str, unauthorized: IntEnum):
        self.db = db
        self.store = store
        self._unauthorized = unauthorized
        row = db.get(StoreAdmin, store)
        if row is None:
            row = StoreAdmin(store=store, admin=initial_admin)
            db.add(row)
            db.flush()
            logger.info("Store '%s' initialized with admin %s", store, initial_admin)
        self._row = row

    @property
    def admin(self) -> str:
        return self._row.admin

    def is_admin(self, caller: str) -> bool:
        return caller == self._row.admin

    def transfer_admin(self, new_admin: str, caller: str) -> bool:
        if not self.is_admin(caller):
            raise LedgerError(self._unauthorized, self.store)
        previous = self._row.admin
        self._row.admin = new_admin
        self.db.flush()
        logger.info("Store '%s' admin transferred from %s to %s", self.store, previous, new_admin)
        return True
