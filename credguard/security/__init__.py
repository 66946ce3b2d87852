"""
Security module - Startup self-tests.
"""

from credguard.security.hardening import (
    CheckResult,
    CryptoSelfTest,
    SecurityCheckResult,
    StartupSecurityValidator,
)

__all__ = [
    "CheckResult",
    "CryptoSelfTest",
    "SecurityCheckResult",
    "StartupSecurityValidator",
]
