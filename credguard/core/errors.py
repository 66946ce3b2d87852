"""
Error Taxonomy
==============

Typed failures raised by credguard.

- InvalidParameters: caller bug, deterministic, never retry
- UnsupportedAlgorithm: runtime lacks the required primitive (fatal)
- EntropyUnavailable: OS cannot supply secure randomness (fatal)
"""

from __future__ import annotations


class CredGuardError(Exception):
    """Base class for all credguard errors."""
    pass


class KdfError(CredGuardError):
    """Raised when key derivation cannot be performed."""
    pass


class InvalidParameters(KdfError, ValueError):
    """Raised for a non-positive iteration count or an invalid key size."""
    pass


class UnsupportedAlgorithm(KdfError):
    """Raised when PBKDF2-HMAC-SHA512 is unavailable in the runtime."""
    pass


class EntropyUnavailable(CredGuardError):
    """Raised when the host cannot provide cryptographically secure randomness."""
    pass


class PasswordValidationError(CredGuardError, ValueError):
    """Raised when a password doesn't meet the strength policy."""
    pass
