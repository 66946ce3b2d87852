"""
Unit Tests for configuration loading
"""

import pytest

from credguard.core.config import (
    DEFAULT_PASSWORD_POLICY,
    DEFAULT_SECURITY_POLICY,
    CredGuardConfig,
    LoggingConfig,
    PasswordPolicy,
    SecurityPolicy,
)
from credguard.core.errors import InvalidParameters


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any CREDGUARD_ variables from the environment."""
    import os

    for key in list(os.environ):
        if key.startswith("CREDGUARD_"):
            monkeypatch.delenv(key)
    return monkeypatch


class TestSecurityPolicy:

    def test_defaults(self):
        assert DEFAULT_SECURITY_POLICY == SecurityPolicy(iterations=1000, key_size=256, salt_size=16)

    def test_derived_lengths(self):
        policy = SecurityPolicy(iterations=1, key_size=512, salt_size=8)

        assert policy.key_bytes == 64
        assert policy.key_hex_length == 128
        assert policy.salt_hex_length == 16

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"iterations": 0},
            {"iterations": -5},
            {"key_size": 0},
            {"key_size": 100},
            {"salt_size": 0},
            {"iterations": True},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidParameters):
            SecurityPolicy(**kwargs)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_SECURITY_POLICY.iterations = 1


class TestPasswordPolicy:

    def test_defaults(self):
        assert DEFAULT_PASSWORD_POLICY == PasswordPolicy(8, 1, 1, 1, 1)

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            PasswordPolicy(min_symbols=-1)


class TestLoggingConfig:

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")


class TestCredGuardConfig:

    def test_load_defaults(self, clean_env):
        config = CredGuardConfig.load()

        assert config.security == DEFAULT_SECURITY_POLICY
        assert config.strength == DEFAULT_PASSWORD_POLICY
        assert config.logging.level == "INFO"

    def test_env_overrides(self, clean_env):
        clean_env.setenv("CREDGUARD_SECURITY__ITERATIONS", "210000")
        clean_env.setenv("CREDGUARD_SECURITY__KEY_SIZE", "512")
        clean_env.setenv("CREDGUARD_SECURITY__SALT_SIZE", "32")
        clean_env.setenv("CREDGUARD_STRENGTH__MIN_LENGTH", "12")
        clean_env.setenv("CREDGUARD_LOGGING__LEVEL", "DEBUG")

        config = CredGuardConfig.load()

        assert config.security == SecurityPolicy(iterations=210000, key_size=512, salt_size=32)
        assert config.strength.min_length == 12
        assert config.strength.min_symbols == 1
        assert config.logging.level == "DEBUG"

    def test_invalid_env_override(self, clean_env):
        clean_env.setenv("CREDGUARD_SECURITY__KEY_SIZE", "100")

        with pytest.raises(InvalidParameters):
            CredGuardConfig.load()

    def test_sensitive_keys_ignored(self, clean_env):
        assert CredGuardConfig._parse_env_overrides("CREDGUARD") == {}
        clean_env.setenv("CREDGUARD_SECURITY__PEPPER", "hunter2")

        assert CredGuardConfig._parse_env_overrides("CREDGUARD") == {}

    def test_immutable(self):
        config = CredGuardConfig()

        with pytest.raises(AttributeError):
            config._security = SecurityPolicy(iterations=1)

    def test_hash_tracks_contents(self):
        assert CredGuardConfig().config_hash == CredGuardConfig().config_hash
        assert CredGuardConfig().config_hash != CredGuardConfig(security=SecurityPolicy(iterations=2)).config_hash

    def test_repr(self):
        assert repr(CredGuardConfig()).startswith("CredGuardConfig(hash=")
