"""Unit tests for PasswordHashingService."""

import pytest

from storerate_identity.exceptions import WeakPasswordError
from storerate_identity.services import PasswordHashingService

STRONG_PASSWORD = "Secret#123"


@pytest.fixture
def service():
    # bcrypt minimum work factor keeps the suite fast
    return PasswordHashingService(rounds=4)


class TestHashAndVerify:
    def test_hash_is_not_plaintext(self, service):
        hashed = service.hash(STRONG_PASSWORD)

        assert hashed != STRONG_PASSWORD
        assert hashed.startswith("$2")

    def test_verify_correct_password(self, service):
        hashed = service.hash(STRONG_PASSWORD)

        assert service.verify(STRONG_PASSWORD, hashed) is True

    def test_verify_wrong_password(self, service):
        hashed = service.hash(STRONG_PASSWORD)

        assert service.verify("Wrong#1234", hashed) is False

    def test_verify_without_hash_is_false(self, service):
        """Unknown accounts still run bcrypt against a dummy hash."""
        assert service.verify(STRONG_PASSWORD, None) is False

    def test_verify_garbage_hash_is_false(self, service):
        assert service.verify(STRONG_PASSWORD, "not-a-bcrypt-hash") is False

    def test_same_password_gets_distinct_salts(self, service):
        assert service.hash(STRONG_PASSWORD) != service.hash(STRONG_PASSWORD)


class TestPasswordStrength:
    @pytest.mark.parametrize(
        "password",
        ["Secret#1", "ABCDEFGH!", "Sixteen#Chars123"],
    )
    def test_accepts_valid_passwords(self, service, password):
        service.validate_strength(password)

    def test_rejects_too_short(self, service):
        with pytest.raises(WeakPasswordError) as exc_info:
            service.hash("Ab#1")

        messages = [e.message for e in exc_info.value.errors]
        assert "Password must be between 8 and 16 characters" in messages

    def test_rejects_too_long(self, service):
        with pytest.raises(WeakPasswordError):
            service.validate_strength("Seventeen#Chars12")

    def test_reports_every_broken_rule(self, service):
        with pytest.raises(WeakPasswordError) as exc_info:
            service.validate_strength("short")

        messages = {e.message for e in exc_info.value.errors}
        assert messages == {
            "Password must be between 8 and 16 characters",
            "Password must contain at least one uppercase letter",
            "Password must contain at least one special character",
        }
        assert {e.field for e in exc_info.value.errors} == {"password"}

    def test_symbol_outside_allowed_set_does_not_count(self, service):
        with pytest.raises(WeakPasswordError) as exc_info:
            service.validate_strength("Password-123")

        messages = [e.message for e in exc_info.value.errors]
        assert messages == ["Password must contain at least one special character"]

    def test_custom_field_name(self, service):
        with pytest.raises(WeakPasswordError) as exc_info:
            service.validate_strength("weak", field="newPassword")

        assert {e.field for e in exc_info.value.errors} == {"newPassword"}
