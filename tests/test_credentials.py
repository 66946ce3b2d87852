"""
Integration Tests for enrollment and verification
"""

import pytest

from credguard.auth.credentials import CredentialHasher, StoredCredential
from credguard.core.config import CredGuardConfig, PasswordPolicy, SecurityPolicy
from credguard.core.crypto.kdf import derive_key
from credguard.core.errors import EntropyUnavailable, InvalidParameters, PasswordValidationError


@pytest.fixture
def hasher(fast_policy):
    return CredentialHasher(policy=fast_policy)


class TestEnroll:

    def test_enroll_produces_current_parameters(self, hasher, fast_policy):
        credential = hasher.enroll("Password1!")

        assert credential.iterations == fast_policy.iterations
        assert credential.key_size == fast_policy.key_size
        assert len(credential.salt) == fast_policy.salt_hex_length
        assert len(credential.password_hash) == fast_policy.key_hex_length

    def test_enroll_hash_is_derivable(self, hasher):
        credential = hasher.enroll("Password1!")

        assert credential.password_hash == derive_key(
            "Password1!", credential.salt, credential.iterations, credential.key_size
        )

    def test_same_password_gets_fresh_salt(self, hasher):
        first = hasher.enroll("Password1!")
        second = hasher.enroll("Password1!")

        assert first.salt != second.salt
        assert first.password_hash != second.password_hash

    def test_weak_password_rejected(self, hasher):
        with pytest.raises(PasswordValidationError):
            hasher.enroll("password")

    def test_strength_policy_is_applied(self, fast_policy):
        hasher = CredentialHasher(policy=fast_policy, strength=PasswordPolicy(min_length=16))

        with pytest.raises(PasswordValidationError):
            hasher.enroll("Password1!")

    def test_injected_source(self, fast_policy, counting_source):
        hasher = CredentialHasher(policy=fast_policy, source=counting_source)

        credential = hasher.enroll("Password1!")

        assert credential.salt == "00000000000000000000000000000001"

    def test_short_source(self, fast_policy, short_source):
        hasher = CredentialHasher(policy=fast_policy, source=short_source)

        with pytest.raises(EntropyUnavailable):
            hasher.enroll("Password1!")

    def test_repr_hides_secrets(self, hasher):
        credential = hasher.enroll("Password1!")

        assert credential.password_hash not in repr(credential)
        assert credential.salt not in repr(credential)


class TestVerify:

    def test_correct_password(self, hasher):
        credential = hasher.enroll("Password1!")

        assert hasher.verify("Password1!", credential) is True

    def test_wrong_password(self, hasher):
        credential = hasher.enroll("Password1!")

        assert hasher.verify("Password2!", credential) is False

    def test_old_parameters_still_verify(self, fast_policy):
        old = CredentialHasher(policy=SecurityPolicy(iterations=5, key_size=128, salt_size=8))
        credential = old.enroll("Password1!")
        current = CredentialHasher(policy=fast_policy)

        assert current.verify("Password1!", credential) is True
        assert current.needs_rehash(credential) is True

    def test_invalid_record_parameters(self, hasher):
        record = StoredCredential(password_hash="00", salt="ab" * 16, iterations=0, key_size=256)

        with pytest.raises(InvalidParameters):
            hasher.verify("Password1!", record)


class TestNeedsRehash:

    def test_fresh_credential_not_drifted(self, hasher):
        assert hasher.needs_rehash(hasher.enroll("Password1!")) is False

    def test_rehash_flow(self, fast_policy):
        old = CredentialHasher(policy=SecurityPolicy(iterations=5, key_size=256, salt_size=16))
        current = CredentialHasher(policy=fast_policy)
        stored = old.enroll("Password1!")

        if current.verify("Password1!", stored) and current.needs_rehash(stored):
            stored = current.enroll("Password1!")

        assert stored.iterations == fast_policy.iterations
        assert current.needs_rehash(stored) is False

    def test_from_config(self, fast_policy):
        config = CredGuardConfig(security=fast_policy)

        hasher = CredentialHasher.from_config(config)

        assert hasher.policy == fast_policy
