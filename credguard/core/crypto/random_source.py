"""
Secure Random Source
====================

Injectable capability for cryptographically secure random bytes.

The default implementation reads the operating system CSPRNG through
``secrets``, which is safe to call from many threads at once: every call
draws independent bytes and no generator state is shared in-process.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from credguard.core.errors import EntropyUnavailable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce ``n`` unpredictable bytes."""

    def random_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """
    CSPRNG backed by the operating system entropy pool.

    Construct once at startup and pass it to the salt generator.
    """

    __slots__ = ()

    def random_bytes(self, n: int) -> bytes:
        """
        Draw ``n`` random bytes.

        Raises:
            EntropyUnavailable: If the host cannot supply secure randomness
        """
        try:
            return secrets.token_bytes(n)
        except (NotImplementedError, OSError) as e:
            raise EntropyUnavailable(f"Secure randomness unavailable: {e}") from e

    def __repr__(self) -> str:
        return "SystemRandomSource()"
