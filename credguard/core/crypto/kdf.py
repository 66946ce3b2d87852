"""
Key Derivation Functions
========================

PBKDF2-HMAC-SHA512 password hashing with hex-encoded output.

The salt is passed around as lowercase hex text and the bytes of that text
are what PBKDF2 consumes. Generation and verification must therefore both
hand the stored hex string to derive_key unchanged.
"""

from __future__ import annotations

import hmac
import logging
from typing import Any, Final

from cryptography.exceptions import UnsupportedAlgorithm as BackendUnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from credguard.core.config import SecurityPolicy
from credguard.core.errors import InvalidParameters, UnsupportedAlgorithm

logger = logging.getLogger(__name__)

# OpenSSL takes the round count and the output length as C ints
MAX_ITERATIONS: Final[int] = 2**31 - 1
MAX_KEY_BYTES: Final[int] = 2**31 - 1


def encode_password(password: str) -> bytes:
    """UTF-8 bytes fed to PBKDF2. Lone surrogates are passed through rather than rejected."""
    return password.encode("utf-8", "surrogatepass")


def _check_parameters(iterations: Any, key_bits: Any) -> None:
    if not isinstance(iterations, int) or isinstance(iterations, bool) or iterations <= 0:
        raise InvalidParameters(f"iterations must be a positive integer, got {iterations!r}")
    if iterations > MAX_ITERATIONS:
        raise InvalidParameters(f"iterations must be at most {MAX_ITERATIONS}, got {iterations!r}")
    if not isinstance(key_bits, int) or isinstance(key_bits, bool) or key_bits <= 0 or key_bits % 8:
        raise InvalidParameters(f"key_bits must be a positive multiple of 8, got {key_bits!r}")
    if key_bits // 8 > MAX_KEY_BYTES:
        raise InvalidParameters(f"key_bits must be at most {MAX_KEY_BYTES * 8}, got {key_bits!r}")


def derive_key(
    password: str,
    salt_hex: str,
    iterations: int,
    key_bits: int,
) -> str:
    """
    Derive a key from a password using PBKDF2-HMAC-SHA512.

    Args:
        password: User password (may be empty)
        salt_hex: Salt as produced by the salt generator
        iterations: PBKDF2 round count
        key_bits: Output length in bits

    Returns:
        Derived key as lowercase hex, ``key_bits // 4`` characters long

    Raises:
        InvalidParameters: If iterations or key_bits is non-positive, not an integer,
            beyond what the backend accepts, or key_bits is not a multiple of 8
        UnsupportedAlgorithm: If the cryptography backend lacks PBKDF2-HMAC-SHA512
    """
    _check_parameters(iterations, key_bits)

    try:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA512(),
            length=key_bits // 8,
            salt=salt_hex.encode("utf-8"),
            iterations=iterations,
        )
        derived = kdf.derive(encode_password(password))
    except BackendUnsupportedAlgorithm as e:
        raise UnsupportedAlgorithm(f"PBKDF2-HMAC-SHA512 is not available: {e}") from e
    except OverflowError as e:
        raise InvalidParameters(f"Parameters out of range for the backend: {e}") from e

    logger.debug("Derived %d-bit key with %d iterations", key_bits, iterations)
    return derived.hex()


def derive_key_with_policy(password: str, salt_hex: str, policy: SecurityPolicy) -> str:
    """Derive a key using the iteration count and key size of ``policy``."""
    return derive_key(password, salt_hex, policy.iterations, policy.key_size)


def keys_match(candidate_hex: str, stored_hex: str) -> bool:
    """
    Compare two encoded keys in constant time.

    Hex case is normalised first so keys stored in uppercase still match.
    """
    return hmac.compare_digest(
        candidate_hex.lower().encode("ascii", "replace"),
        stored_hex.lower().encode("ascii", "replace"),
    )
