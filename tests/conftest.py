# credguard test configuration
# Shared fixtures for policy and random-source injection

import itertools

import pytest

from credguard.core.config import PasswordPolicy, SecurityPolicy


class CountingRandomSource:
    """Deterministic random source for tests: each call returns the next counter value."""

    def __init__(self):
        self._counter = itertools.count(1)
        self.calls = 0

    def random_bytes(self, n):
        self.calls += 1
        return next(self._counter).to_bytes(n, "big")


class ShortRandomSource:
    """Random source that returns fewer bytes than requested."""

    def random_bytes(self, n):
        return b"\x01" * (n - 1)


@pytest.fixture
def policy():
    """Security policy used in the drift examples."""
    return SecurityPolicy(iterations=1000, key_size=256, salt_size=16)


@pytest.fixture
def fast_policy():
    """Cheap policy for tests that derive many keys."""
    return SecurityPolicy(iterations=10, key_size=256, salt_size=16)


@pytest.fixture
def password_policy():
    return PasswordPolicy()


@pytest.fixture
def counting_source():
    return CountingRandomSource()


@pytest.fixture
def short_source():
    return ShortRandomSource()
