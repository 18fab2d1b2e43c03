"""Tests for the bcrypt password hashing service."""

import pytest

from roster_auth import PasswordHashingService, WeakPasswordError


class TestPasswordHashingService:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        digest = self.service.hash("secure_password_123")

        assert digest != "secure_password_123"
        assert digest.startswith("$2b$04$")
        assert self.service.verify("secure_password_123", digest) is True
        assert self.service.verify("wrong_password", digest) is False

    def test_hashes_are_salted(self):
        assert self.service.hash("secure_password") != self.service.hash(
            "secure_password",
        )

    def test_verify_returns_false_for_malformed_hash(self):
        assert self.service.verify("secure_password", "not-a-hash") is False

    @pytest.mark.parametrize("password", ["", "12345", "x" * 129])
    def test_rejects_weak_passwords(self, password):
        with pytest.raises(WeakPasswordError):
            self.service.hash(password)

    def test_custom_min_length(self):
        service = PasswordHashingService(rounds=4, min_length=10)

        with pytest.raises(WeakPasswordError):
            service.hash("short_pw")
