"""Audit logging service for compliance tracking."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from healthledger.models.ledger import AuditLog

logger = logging.getLogger(__name__)


def log_action(
    db: Session,
    *,
    actor: str,
    action: str,
    resource_type: str,
    resource_id: str,
    block_height: int,
    detail: dict[str, Any] | None = None,
) -> None:
    """Write an immutable audit log entry."""
    entry = AuditLog(
        actor=actor,
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        block_height=block_height,
        detail=detail,
    )
    db.add(entry)
    db.flush()
    logger.info(
        "AUDIT: %s %s %s/%s @%d", actor, action, resource_type, resource_id, block_height
    )


def audit_trail(db: Session, resource_type: str, resource_id: str) -> list[AuditLog]:
    """All audit entries for one record, oldest first."""
    return (
        db.query(AuditLog)
        .filter(AuditLog.resource_type == resource_type, AuditLog.resource_id == resource_id)
        .order_by(AuditLog.id)
        .all()
    )
