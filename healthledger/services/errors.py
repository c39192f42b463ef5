"""
Ledger error taxonomy.

Codes are stable across stores except 104, which means InvalidStatus for
authorizations and Revoked for consents. Each store therefore has its own
enum rather than sharing one global table.
"""

from enum import IntEnum


class PatientError(IntEnum):
    UNAUTHORIZED = 100
    ALREADY_REGISTERED = 101
    NOT_FOUND = 102


class PolicyError(IntEnum):
    UNAUTHORIZED = 100
    ALREADY_EXISTS = 101
    NOT_FOUND = 102
    INVALID_WINDOW = 103


class ConsentError(IntEnum):
    UNAUTHORIZED = 100
    ALREADY_EXISTS = 101
    NOT_FOUND = 102
    EXPIRED = 103
    REVOKED = 104


class AuthorizationError(IntEnum):
    UNAUTHORIZED = 100
    ALREADY_EXISTS = 101
    NOT_FOUND = 102
    EXPIRED = 103
    INVALID_STATUS = 104


# HTTP status used when an error crosses the API boundary
HTTP_STATUS = {100: 403, 101: 409, 102: 404, 103: 422, 104: 409}


class LedgerError(Exception):
    """A rejected mutation. Carries the per-store numeric code."""

    def __init__(self, code: IntEnum, store: str):
        self.code = code
        self.store = store
        super().__init__(f"{store}: {code.name} ({int(code)})")

    @property
    def http_status(self) -> int:
        return HTTP_STATUS[int(self.code)]
