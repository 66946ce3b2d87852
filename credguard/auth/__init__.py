"""
credguard Authentication Module
===============================

Provides the policy side of credential handling:
- Password strength validation
- Parameter drift detection for stored credentials
- Enrollment and verification helpers
"""

from credguard.auth.credentials import CredentialHasher, StoredCredential
from credguard.auth.drift import CredentialRecord, has_drifted, record_has_drifted
from credguard.auth.strength import (
    StrengthReport,
    evaluate_password,
    is_strong_enough,
    validate_password,
)

__all__ = [
    "CredentialHasher",
    "StoredCredential",
    "CredentialRecord",
    "has_drifted",
    "record_has_drifted",
    "StrengthReport",
    "evaluate_password",
    "is_strong_enough",
    "validate_password",
]
