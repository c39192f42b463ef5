"""
FastAPI routes – the main API surface.

Every store endpoint takes the caller identity from ``X-Caller`` and the
current block height from ``X-Block-Height``. Mutations answer with a tagged
result; rejected ones are turned into ``{"type": "err", "value": code}`` by
the handler registered in ``healthledger.main``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from healthledger.api import authorizations, consents, patients, policies
from healthledger.config import settings
from healthledger.models.database import get_db
from healthledger.schemas.api import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Basic health endpoint – verifies DB connectivity."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as exc:
        logger.error("Health check could not reach the database: %s", exc)
        db_status = "disconnected"
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        database=db_status,
    )


# ---------------------------------------------------------------------------
# Record stores
# ---------------------------------------------------------------------------

router.include_router(patients.router)
router.include_router(policies.router)
router.include_router(consents.router)
router.include_router(authorizations.router)
