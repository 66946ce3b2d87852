"""
credguard Cryptographic Core
============================

Architecture:
    1. PBKDF2-HMAC-SHA512: Password key derivation (hex output)
    2. OS CSPRNG: Salt generation through an injectable random source

Security Properties:
    - Deliberately slow, parameterised derivation
    - Constant-time comparison of derived keys
    - Secure RNG for all random values

WARNING: This module handles sensitive cryptographic material.
         Incorrect usage can compromise security.
"""

from credguard.core.crypto.kdf import derive_key, derive_key_with_policy, encode_password, keys_match
from credguard.core.crypto.random_source import RandomSource, SystemRandomSource
from credguard.core.crypto.salt import SaltGenerator, generate_salt

__all__ = [
    "derive_key",
    "derive_key_with_policy",
    "encode_password",
    "keys_match",
    "RandomSource",
    "SystemRandomSource",
    "SaltGenerator",
    "generate_salt",
]
