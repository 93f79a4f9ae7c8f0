"""Unit tests for CredentialService."""

from unittest.mock import Mock

import pytest

from judgehub.domain.shared import CredentialError, ValidationError
from judgehub_identity.application.services import CredentialService
from judgehub_identity.domain.user import User, parse_issued_at
from judgehub_identity.exceptions import (
    IncorrectOldPasswordError,
    PasswordMismatchError,
    RequiredFieldError,
    WeakPasswordError,
)
from judgehub_identity.services import PasswordHashingService

NOW = 1_700_000_000
OLD_PASSWORD = "old_password"
NEW_PASSWORD = "new_password"


class TestPasswords:
    """Tests for setting and verifying passwords with real bcrypt."""

    def setup_method(self):
        self.service = CredentialService(
            PasswordHashingService(rounds=4),
            clock=lambda: NOW,
        )
        self.user = User.create("alice", "Alice")
        self.service.set_password(self.user, OLD_PASSWORD)

    def test_password_is_hashed(self):
        assert self.user.password_hash != OLD_PASSWORD
        assert self.service.verify_password(self.user, OLD_PASSWORD) is True
        assert self.service.verify_password(self.user, "nope") is False

    def test_set_password_replaces_hash(self):
        self.service.set_password(self.user, NEW_PASSWORD)

        assert self.service.verify_password(self.user, NEW_PASSWORD) is True
        assert self.service.verify_password(self.user, OLD_PASSWORD) is False

    def test_weak_password_leaves_hash_unchanged(self):
        before = self.user.password_hash

        with pytest.raises(WeakPasswordError):
            self.service.set_password(self.user, "")

        assert self.user.password_hash == before

    def test_needs_rehash(self):
        assert self.service.needs_rehash(self.user) is False


class TestAuthKeyAndResetToken:
    """Tests for generated tokens."""

    def setup_method(self):
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.generate_random_string.side_effect = ["r" * 32, "s" * 32]
        self.clock = Mock(return_value=NOW)
        self.service = CredentialService(
            self.password_service,
            password_reset_token_expire_seconds=600,
            clock=self.clock,
        )
        self.user = User.create("alice", "Alice")

    def test_generate_auth_key(self):
        key = self.service.generate_auth_key(self.user)

        assert key == "r" * 32
        assert self.user.auth_key == key
        self.password_service.generate_random_string.assert_called_once_with(32)

    def test_validate_auth_key(self):
        key = self.service.generate_auth_key(self.user)

        assert self.service.validate_auth_key(self.user, key) is True
        assert self.service.validate_auth_key(self.user, "other") is False
        assert self.service.validate_auth_key(self.user, "") is False

    def test_validate_auth_key_without_stored_key(self):
        assert self.service.validate_auth_key(self.user, "") is False

    def test_generate_password_reset_token(self):
        token = self.service.generate_password_reset_token(self.user)

        assert token == f"{'r' * 32}_{NOW}"
        assert self.user.password_reset_token == token
        assert parse_issued_at(token) == NOW
        self.clock.assert_called_once_with()

    def test_remove_password_reset_token(self):
        self.service.generate_password_reset_token(self.user)

        self.service.remove_password_reset_token(self.user)

        assert self.user.password_reset_token is None

    def test_token_validity_uses_configured_expiry(self):
        token = self.service.generate_password_reset_token(self.user)

        self.clock.return_value = NOW + 600
        assert self.service.is_password_reset_token_valid(token) is True

        self.clock.return_value = NOW + 601
        assert self.service.is_password_reset_token_valid(token) is False

    def test_token_validity_rejects_empty(self):
        assert self.service.is_password_reset_token_valid("") is False
        assert self.service.is_password_reset_token_valid(None) is False


class TestValidatePasswordChange:
    """Tests for the change-password form check."""

    def setup_method(self):
        self.service = CredentialService(PasswordHashingService(rounds=4))
        self.user = User.create("alice", "Alice")
        self.service.set_password(self.user, OLD_PASSWORD)
        self.hash_before = self.user.password_hash

    def test_valid_change(self):
        result = self.service.validate_password_change(
            self.user, OLD_PASSWORD, NEW_PASSWORD, NEW_PASSWORD
        )

        assert result.is_valid is True
        assert self.user.password_hash == self.hash_before

    def test_incorrect_old_password(self):
        result = self.service.validate_password_change(
            self.user, "wrong", NEW_PASSWORD, NEW_PASSWORD
        )

        assert result.fields == ["old_password"]
        error = result.errors_for("old_password")[0]
        assert isinstance(error, IncorrectOldPasswordError)
        assert isinstance(error, CredentialError)
        assert self.user.password_hash == self.hash_before

    def test_mismatched_verify_password(self):
        result = self.service.validate_password_change(
            self.user, OLD_PASSWORD, NEW_PASSWORD, "something_else"
        )

        assert result.fields == ["verify_password"]
        error = result.errors_for("verify_password")[0]
        assert isinstance(error, PasswordMismatchError)

    def test_all_fields_required(self):
        result = self.service.validate_password_change(self.user, "", "", "")

        assert result.fields == ["old_password", "new_password", "verify_password"]
        for field_name in result.fields:
            error = result.errors_for(field_name)[0]
            assert isinstance(error, RequiredFieldError)
            assert isinstance(error, ValidationError)

    def test_collects_every_failure(self):
        result = self.service.validate_password_change(
            self.user, "wrong", NEW_PASSWORD, ""
        )

        assert result.fields == ["verify_password", "old_password"]

    def test_raise_for_errors_lists_all_fields(self):
        result = self.service.validate_password_change(
            self.user, "wrong", NEW_PASSWORD, "other"
        )

        with pytest.raises(IncorrectOldPasswordError) as exc_info:
            result.raise_for_errors()

        assert set(exc_info.value.details["fields"]) == {
            "old_password",
            "verify_password",
        }
