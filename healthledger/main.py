"""
FastAPI application entrypoint.

Run locally:  uvicorn healthledger.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from healthledger.api.routes import router
from healthledger.config import settings
from healthledger.models.database import Base, engine
from healthledger.schemas.api import TxResult
from healthledger.services.errors import LedgerError

logging.basicConfig(
    level=settings.LOG_LEVEL, format="%(levelname)s | %(name)s | %(message)s"
)

app = FastAPI(
    title="Healthcare Ledger API",
    description=(
        "Permissioned, block-height-aware record stores for patient identities, "
        "insurance policies, data-sharing consents and treatment authorizations."
    ),
    version="1.0.0",
)

app.include_router(router, prefix="/api/v1")


@app.exception_handler(LedgerError)
def ledger_error_handler(request: Request, exc: LedgerError):
    body = TxResult(type="err", value=int(exc.code), error=exc.code.name)
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
