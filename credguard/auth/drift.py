"""
Parameter Drift Detection
=========================

Decides whether a stored credential was derived with parameters other than
the current security policy. A drifted credential that verifies successfully
should be re-derived by the caller with the current policy; this module only
signals the need.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from credguard.core.config import SecurityPolicy

logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialRecord(Protocol):
    """
    Read-only view of a persisted credential.

    Attributes:
        iterations: Work factor used at derivation time
        key_size: Key size in bits used at derivation time
        salt: Salt as hex text (measured, never decoded)
    """

    @property
    def iterations(self) -> int: ...

    @property
    def key_size(self) -> int: ...

    @property
    def salt(self) -> str: ...


def has_drifted(
    record_iterations: int,
    record_key_size: int,
    record_salt_hex_length: int,
    policy: SecurityPolicy,
) -> bool:
    """
    Check whether recorded derivation parameters differ from ``policy``.

    Returns:
        True if the iteration count, the key size or the salt hex length differ
    """
    drifted = (
        record_iterations != policy.iterations
        or record_key_size != policy.key_size
        or record_salt_hex_length != policy.salt_hex_length
    )
    if drifted:
        logger.debug(
            "Credential parameters drifted: iterations %d->%d, key_size %d->%d, salt_hex_length %d->%d",
            record_iterations, policy.iterations,
            record_key_size, policy.key_size,
            record_salt_hex_length, policy.salt_hex_length,
        )
    return drifted


def record_has_drifted(record: CredentialRecord, policy: SecurityPolicy) -> bool:
    """Check a credential record against ``policy``."""
    return has_drifted(record.iterations, record.key_size, len(record.salt), policy)
