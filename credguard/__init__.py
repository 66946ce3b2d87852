"""
credguard - Password Credential Hardening
=========================================

PBKDF2-HMAC-SHA512 key derivation, salt generation, parameter drift
detection and password strength policy.

Security Notice:
- No secrets are logged
- Fail-closed design pattern
- Policies are immutable and passed explicitly
"""

import logging

from credguard.auth.credentials import CredentialHasher, StoredCredential
from credguard.auth.drift import CredentialRecord, has_drifted, record_has_drifted
from credguard.auth.strength import evaluate_password, is_strong_enough, validate_password
from credguard.core.config import (
    CredGuardConfig,
    PasswordPolicy,
    SecurityPolicy,
)
from credguard.core.crypto.kdf import derive_key
from credguard.core.crypto.salt import SaltGenerator, generate_salt
from credguard.core.errors import (
    EntropyUnavailable,
    InvalidParameters,
    KdfError,
    PasswordValidationError,
    UnsupportedAlgorithm,
)
from credguard.core.logging import configure_logging, get_secure_logger

__version__ = "0.1.0"
__author__ = "credguard Team"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CredGuardConfig",
    "SecurityPolicy",
    "PasswordPolicy",
    "derive_key",
    "SaltGenerator",
    "generate_salt",
    "has_drifted",
    "record_has_drifted",
    "CredentialRecord",
    "is_strong_enough",
    "evaluate_password",
    "validate_password",
    "CredentialHasher",
    "StoredCredential",
    "KdfError",
    "InvalidParameters",
    "UnsupportedAlgorithm",
    "EntropyUnavailable",
    "PasswordValidationError",
    "configure_logging",
    "get_secure_logger",
    "__version__",
]
