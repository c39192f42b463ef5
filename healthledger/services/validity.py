"""
Validity evaluators.

Pure functions of a record snapshot and the current block height. Patients
have no evaluator; their ``active`` flag is read directly.
"""

from healthledger.schemas.records import (
    Authorization,
    AuthorizationStatus,
    Consent,
    InsurancePolicy,
)


def policy_covers(policy: InsurancePolicy, block_height: int) -> bool:
    return policy.active and policy.coverage_end >= block_height


def consent_is_valid(consent: Consent, block_height: int) -> bool:
    return not consent.revoked and consent.expires_at >= block_height


def authorization_is_valid(auth: Authorization, block_height: int) -> bool:
    return auth.status == AuthorizationStatus.APPROVED and auth.expires_at >= block_height


def extends_forward(new_expiry: int, current_expiry: int, block_height: int) -> bool:
    """An extension must land in the future and strictly after the stored expiry."""
    return new_expiry > block_height and new_expiry > current_expiry
