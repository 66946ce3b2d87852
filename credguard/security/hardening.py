"""
Security Hardening Module
=========================

Cryptographic self-tests run at startup.

This module implements:
- PBKDF2-HMAC-SHA512 cross-check against hashlib
- CSPRNG sanity check
- Fail-closed startup validation
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from credguard.core.crypto.kdf import derive_key, encode_password
from credguard.core.crypto.random_source import RandomSource, SystemRandomSource
from credguard.core.errors import CredGuardError, EntropyUnavailable, UnsupportedAlgorithm

logger = logging.getLogger(__name__)


class SecurityCheckResult(Enum):
    """Result of a security check."""
    PASS = auto()
    WARN = auto()
    FAIL = auto()


@dataclass
class CheckResult:
    """Individual security check result."""
    name: str
    result: SecurityCheckResult
    message: str
    details: Optional[str] = None


class CryptoSelfTest:
    """
    Cryptographic algorithm self-tests.

    Run on startup to verify the crypto backend and entropy source work.
    """

    @staticmethod
    def test_pbkdf2() -> CheckResult:
        """Compare derive_key with an independent PBKDF2 implementation."""
        password = "self-test pässwörd \u20ac"
        salt_hex = "00112233445566778899aabbccddeeff"
        iterations = 2
        try:
            derived = derive_key(password, salt_hex, iterations, 256)
        except CredGuardError as e:
            return CheckResult("PBKDF2-HMAC-SHA512", SecurityCheckResult.FAIL, f"Self-test failed: {e}")

        expected = hashlib.pbkdf2_hmac(
            "sha512", encode_password(password), salt_hex.encode("utf-8"), iterations, dklen=32
        ).hex()
        if derived != expected:
            return CheckResult("PBKDF2-HMAC-SHA512", SecurityCheckResult.FAIL, "Known-answer mismatch")
        return CheckResult("PBKDF2-HMAC-SHA512", SecurityCheckResult.PASS, "Self-test passed")

    @staticmethod
    def test_random_generator(source: Optional[RandomSource] = None) -> CheckResult:
        """Test cryptographic random number generator."""
        source = source or SystemRandomSource()
        try:
            random1 = source.random_bytes(32)
            random2 = source.random_bytes(32)
        except EntropyUnavailable as e:
            return CheckResult("CSPRNG", SecurityCheckResult.FAIL, f"Self-test failed: {e}")

        if len(random1) != 32 or len(random2) != 32:
            return CheckResult("CSPRNG", SecurityCheckResult.FAIL, "Short read from random source")

        if random1 == random2:
            return CheckResult("CSPRNG", SecurityCheckResult.FAIL, "Random bytes not unique")

        unique_bytes = len(set(random1))
        if unique_bytes < 20:  # At least 20 unique bytes in 32
            return CheckResult("CSPRNG", SecurityCheckResult.WARN, f"Low entropy: {unique_bytes}/32 unique")

        return CheckResult("CSPRNG", SecurityCheckResult.PASS, "Self-test passed")

    @classmethod
    def run_all_tests(cls, source: Optional[RandomSource] = None) -> List[CheckResult]:
        """Run all cryptographic self-tests."""
        return [
            cls.test_pbkdf2(),
            cls.test_random_generator(source),
        ]


class StartupSecurityValidator:
    """Fail closed when the environment cannot support credential hashing."""

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self._source = source

    def run(self) -> List[CheckResult]:
        results = CryptoSelfTest.run_all_tests(self._source)
        for check in results:
            if check.result is SecurityCheckResult.PASS:
                logger.debug("%s: %s", check.name, check.message)
            else:
                logger.warning("%s: %s", check.name, check.message)
        return results

    def require_all_pass(self) -> None:
        """
        Run every self-test and raise on the first failure.

        Raises:
            UnsupportedAlgorithm: If the PBKDF2 self-test fails
            EntropyUnavailable: If the CSPRNG self-test fails
        """
        for check in self.run():
            if check.result is not SecurityCheckResult.FAIL:
                continue
            if check.name == "CSPRNG":
                raise EntropyUnavailable(check.message)
            raise UnsupportedAlgorithm(check.message)
