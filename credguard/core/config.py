"""
Secure Configuration Module
===========================

Provides immutable configuration for credential hardening.

Security Features:
- Immutable configuration after initialization
- Environment variable overrides applied once, at load time
- No secrets in default values
- Policies are passed explicitly; there is no global instance

Changing the work factor or the strength thresholds is a deployment action.
Credentials stored under older parameters are migrated through the drift
detector (see credguard.auth.drift).
"""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from typing import Any, Final, Optional

from credguard.core.errors import InvalidParameters


# Security Constants
_SENSITIVE_KEYS: Final[frozenset[str]] = frozenset({
    "secret", "token", "api_key", "private", "credential", "pepper",
})

_VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset({
    "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL",
})


def _is_sensitive_key(key: str) -> bool:
    """Check if a configuration key might contain sensitive data."""
    key_lower = key.lower()
    return any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True, slots=True)
class SecurityPolicy:
    """
    Immutable key-derivation parameters.

    Attributes:
        iterations: PBKDF2 work factor
        key_size: Derived key length in bits (multiple of 8)
        salt_size: Salt length in bytes
    """

    iterations: int = 1000
    key_size: int = 256
    salt_size: int = 16

    def __post_init__(self) -> None:
        """Validate derivation parameters."""
        if not _is_positive_int(self.iterations):
            raise InvalidParameters(f"iterations must be a positive integer: {self.iterations!r}")
        if not _is_positive_int(self.key_size) or self.key_size % 8:
            raise InvalidParameters(f"key_size must be a positive multiple of 8: {self.key_size!r}")
        if not _is_positive_int(self.salt_size):
            raise InvalidParameters(f"salt_size must be a positive integer: {self.salt_size!r}")

    @property
    def key_bytes(self) -> int:
        return self.key_size // 8

    @property
    def key_hex_length(self) -> int:
        return self.key_size // 4

    @property
    def salt_hex_length(self) -> int:
        return self.salt_size * 2


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Immutable password strength thresholds."""

    min_length: int = 8
    min_lowercase: int = 1
    min_uppercase: int = 1
    min_digits: int = 1
    min_symbols: int = 1

    def __post_init__(self) -> None:
        """Validate thresholds."""
        for field_name in ("min_length", "min_lowercase", "min_uppercase", "min_digits", "min_symbols"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{field_name} must be a non-negative integer: {value!r}")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Immutable logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%H:%M:%S"
    enable_console: bool = True

    def __post_init__(self) -> None:
        """Validate logging settings."""
        if self.level.upper() not in _VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.level}")


DEFAULT_SECURITY_POLICY: Final[SecurityPolicy] = SecurityPolicy()
DEFAULT_PASSWORD_POLICY: Final[PasswordPolicy] = PasswordPolicy()


class CredGuardConfig:
    """
    Immutable configuration bundle with environment override support.

    Usage:
        config = CredGuardConfig.load()
        hasher = CredentialHasher.from_config(config)
        iterations = config.security.iterations
    """

    __slots__ = ("_security", "_strength", "_logging", "_frozen", "_config_hash")

    def __init__(
        self,
        security: Optional[SecurityPolicy] = None,
        strength: Optional[PasswordPolicy] = None,
        logging: Optional[LoggingConfig] = None,
    ) -> None:
        """Initialize configuration. Use CredGuardConfig.load() for standard initialization."""
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_security", security or DEFAULT_SECURITY_POLICY)
        object.__setattr__(self, "_strength", strength or DEFAULT_PASSWORD_POLICY)
        object.__setattr__(self, "_logging", logging or LoggingConfig())
        object.__setattr__(self, "_config_hash", self._compute_hash())
        object.__setattr__(self, "_frozen", True)

    def _compute_hash(self) -> str:
        """Compute a hash of the configuration for integrity checking."""
        config_str = f"{self._security}|{self._strength}|{self._logging}"
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    @property
    def security(self) -> SecurityPolicy:
        """Get key-derivation policy."""
        return self._security

    @property
    def strength(self) -> PasswordPolicy:
        """Get password strength policy."""
        return self._strength

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._logging

    @property
    def config_hash(self) -> str:
        """Get configuration integrity hash."""
        return self._config_hash

    @classmethod
    def load(cls, env_prefix: str = "CREDGUARD") -> CredGuardConfig:
        """
        Load configuration with environment variable overrides.

        Environment variables should be prefixed with CREDGUARD_ and use
        double underscores for nested values.

        Examples:
            CREDGUARD_SECURITY__ITERATIONS=210000
            CREDGUARD_SECURITY__KEY_SIZE=512
            CREDGUARD_STRENGTH__MIN_LENGTH=12
            CREDGUARD_LOGGING__LEVEL=DEBUG

        Args:
            env_prefix: Prefix for environment variables (default: CREDGUARD)

        Returns:
            Configured CredGuardConfig instance

        Raises:
            InvalidParameters: If an override yields an invalid security policy
            ValueError: If an override is not an integer where one is expected
        """
        env_overrides = cls._parse_env_overrides(env_prefix)

        security_kwargs: dict[str, Any] = {}
        for name in ("iterations", "key_size", "salt_size"):
            if f"security.{name}" in env_overrides:
                security_kwargs[name] = int(env_overrides[f"security.{name}"])

        strength_kwargs: dict[str, Any] = {}
        for name in ("min_length", "min_lowercase", "min_uppercase", "min_digits", "min_symbols"):
            if f"strength.{name}" in env_overrides:
                strength_kwargs[name] = int(env_overrides[f"strength.{name}"])

        logging_kwargs: dict[str, Any] = {}
        if "logging.level" in env_overrides:
            logging_kwargs["level"] = env_overrides["logging.level"]
        if "logging.enable_console" in env_overrides:
            logging_kwargs["enable_console"] = env_overrides["logging.enable_console"].lower() == "true"

        return cls(
            security=SecurityPolicy(**security_kwargs) if security_kwargs else None,
            strength=PasswordPolicy(**strength_kwargs) if strength_kwargs else None,
            logging=LoggingConfig(**logging_kwargs) if logging_kwargs else None,
        )

    @staticmethod
    def _parse_env_overrides(prefix: str) -> dict[str, str]:
        """Parse environment variables with the given prefix."""
        overrides: dict[str, str] = {}
        prefix_upper = f"{prefix.upper()}_"

        for key, value in os.environ.items():
            if key.startswith(prefix_upper):
                # Convert CREDGUARD_SECTION__KEY to section.key
                config_key = key[len(prefix_upper):].lower().replace("__", ".")

                # SECURITY: Skip sensitive keys from environment
                if _is_sensitive_key(config_key):
                    continue

                overrides[config_key] = value

        return overrides

    def __repr__(self) -> str:
        """Safe string representation."""
        return f"CredGuardConfig(hash={self._config_hash}, security={self._security})"

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, "_frozen") and self._frozen:
            raise AttributeError("CredGuardConfig is immutable after initialization")
        super().__setattr__(name, value)
