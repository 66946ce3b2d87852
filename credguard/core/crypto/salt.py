"""
Salt Generation
===============

Fresh per-credential salts drawn from an injected CSPRNG.
"""

from __future__ import annotations

import logging
from typing import Optional

from credguard.core.config import DEFAULT_SECURITY_POLICY, SecurityPolicy
from credguard.core.crypto.random_source import RandomSource, SystemRandomSource
from credguard.core.errors import EntropyUnavailable

logger = logging.getLogger(__name__)


class SaltGenerator:
    """
    Produces lowercase hex salts of ``2 * policy.salt_size`` characters.

    Usage:
        generator = SaltGenerator(SystemRandomSource(), policy)
        salt = generator.generate()

    Safe for concurrent use when the random source is.
    """

    __slots__ = ("_source", "_policy")

    def __init__(
        self,
        source: RandomSource,
        policy: SecurityPolicy = DEFAULT_SECURITY_POLICY,
    ) -> None:
        self._source = source
        self._policy = policy

    @property
    def policy(self) -> SecurityPolicy:
        return self._policy

    def generate(self) -> str:
        """
        Generate a new salt.

        Raises:
            EntropyUnavailable: If the random source cannot supply enough bytes
        """
        size = self._policy.salt_size
        salt = self._source.random_bytes(size)
        if len(salt) != size:
            raise EntropyUnavailable(
                f"Random source returned {len(salt)} bytes, expected {size}"
            )
        logger.debug("Generated %d-byte salt", size)
        return salt.hex()


def generate_salt(
    policy: SecurityPolicy = DEFAULT_SECURITY_POLICY,
    source: Optional[RandomSource] = None,
) -> str:
    """Generate a salt for ``policy`` using ``source`` (the OS CSPRNG by default)."""
    return SaltGenerator(source or SystemRandomSource(), policy).generate()
