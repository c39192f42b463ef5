"""Shared fixtures: an in-memory SQLite ledger per test."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import healthledger.models.ledger  # noqa: F401  (registers tables on Base)
from healthledger.models.database import Base
from healthledger.schemas.records import CallContext


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def open_store(db):
    """Factory: open a store as ``caller`` at ``block_height``, admin is 'admin'."""

    def _open(store_cls, caller="admin", block_height=100):
        ctx = CallContext(caller=caller, block_height=block_height)
        return store_cls(db, ctx, initial_admin="admin")

    return _open
