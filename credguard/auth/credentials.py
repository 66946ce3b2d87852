"""
Credential Hashing
==================

Ties salt generation, key derivation, drift detection and the strength
policy together for enrollment and verification.

Usage:
    hasher = CredentialHasher.from_config(CredGuardConfig.load())

    # Enrollment / password change
    credential = hasher.enroll("Password1!")
    store(credential)  # caller's responsibility

    # Login
    if hasher.verify(password, stored):
        if hasher.needs_rehash(stored):
            store(hasher.enroll(password))

Nothing here persists credentials or re-hashes on its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from credguard.auth.drift import CredentialRecord, record_has_drifted
from credguard.auth.strength import validate_password
from credguard.core.config import (
    DEFAULT_PASSWORD_POLICY,
    DEFAULT_SECURITY_POLICY,
    CredGuardConfig,
    PasswordPolicy,
    SecurityPolicy,
)
from credguard.core.crypto.kdf import derive_key, keys_match
from credguard.core.crypto.random_source import RandomSource, SystemRandomSource
from credguard.core.crypto.salt import SaltGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoredCredential:
    """
    Derived key plus the parameters it was derived with.

    Note: password_hash and salt are never exposed in repr.
    """

    password_hash: str
    salt: str
    iterations: int
    key_size: int

    def __repr__(self) -> str:
        return (
            f"StoredCredential(iterations={self.iterations}, key_size={self.key_size}, "
            f"salt_len={len(self.salt)})"
        )


class CredentialHasher:
    """
    Enrollment and verification on top of the PBKDF2 primitives.

    Args:
        policy: Current key-derivation policy
        strength: Password strength thresholds enforced at enrollment
        source: CSPRNG used for salts
    """

    __slots__ = ("_policy", "_strength", "_salts")

    def __init__(
        self,
        policy: SecurityPolicy = DEFAULT_SECURITY_POLICY,
        strength: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
        source: Optional[RandomSource] = None,
    ) -> None:
        self._policy = policy
        self._strength = strength
        self._salts = SaltGenerator(source or SystemRandomSource(), policy)

    @classmethod
    def from_config(cls, config: CredGuardConfig, source: Optional[RandomSource] = None) -> CredentialHasher:
        return cls(policy=config.security, strength=config.strength, source=source)

    @property
    def policy(self) -> SecurityPolicy:
        return self._policy

    def enroll(self, password: str) -> StoredCredential:
        """
        Hash a new password with the current policy.

        Raises:
            PasswordValidationError: If the password fails the strength policy
            EntropyUnavailable: If no salt can be generated
        """
        validate_password(password, self._strength)

        salt = self._salts.generate()
        password_hash = derive_key(password, salt, self._policy.iterations, self._policy.key_size)
        return StoredCredential(
            password_hash=password_hash,
            salt=salt,
            iterations=self._policy.iterations,
            key_size=self._policy.key_size,
        )

    def verify(self, password: str, record: StoredCredential) -> bool:
        """
        Check ``password`` against a stored credential.

        The record's own iteration count and key size are used, so credentials
        created under an older policy still verify.

        Raises:
            InvalidParameters: If the record holds an unusable iteration count or key size
        """
        candidate = derive_key(password, record.salt, record.iterations, record.key_size)
        matched = keys_match(candidate, record.password_hash)
        if not matched:
            logger.debug("Credential verification failed")
        return matched

    def needs_rehash(self, record: CredentialRecord) -> bool:
        """True if ``record`` was derived with parameters other than the current policy."""
        return record_has_drifted(record, self._policy)
