"""Tests for the shared user identity."""

import dataclasses

import pytest

from neo_auth.core.exceptions import StructuralValidationError
from neo_auth.credentials.user import UserIdentity, UserTag, UserType


class TestUserTag:
    """Test user tags."""

    def test_valid_tag(self):
        tag = UserTag(key="plan", value="premium")
        assert tag.to_dict() == {"key": "plan", "value": "premium"}

    @pytest.mark.parametrize("key, value", [("", "premium"), ("plan", ""), ("plan", None)])
    def test_empty_fields_rejected(self, key, value):
        with pytest.raises(StructuralValidationError, match="must be a non-empty string"):
            UserTag(key=key, value=value)


class TestUserIdentity:
    """Test user identity construction and invariants."""

    def test_from_dict(self, sample_user_data):
        user = UserIdentity.from_dict(sample_user_data)

        assert user.username == "john"
        assert user.email == "john@example.com"
        assert user.type is UserType.TRADITIONAL
        assert user.tags == (UserTag("plan", "premium"),)
        assert user.get_tag("plan") == "premium"
        assert user.get_tag("missing") is None
        assert not user.is_wallet_user

    def test_round_trip(self, sample_user_data):
        assert UserIdentity.from_dict(sample_user_data).to_dict() == sample_user_data

    def test_construction_is_idempotent(self, sample_user_data):
        assert UserIdentity.from_dict(sample_user_data) == UserIdentity.from_dict(sample_user_data)

    def test_equal_timestamps_accepted(self, sample_user_data):
        sample_user_data["updated_at"] = sample_user_data["created_at"]
        user = UserIdentity.from_dict(sample_user_data)
        assert user.updated_at == user.created_at

    def test_updated_before_created_rejected(self, sample_user_data):
        sample_user_data["updated_at"] = sample_user_data["created_at"] - 1
        with pytest.raises(
            StructuralValidationError,
            match="updated_at must be greater than or equal to created_at",
        ):
            UserIdentity.from_dict(sample_user_data)

    @pytest.mark.parametrize("email", ["john", "john@", "john@example", "john example@x.com", "john@example.com\n"])
    def test_invalid_email_rejected(self, sample_user_data, email):
        sample_user_data["email"] = email
        with pytest.raises(StructuralValidationError, match="email must match a valid address pattern"):
            UserIdentity.from_dict(sample_user_data)

    @pytest.mark.parametrize("created_at", [0, -5, True, "1700000000"])
    def test_timestamps_must_be_positive_integers(self, sample_user_data, created_at):
        sample_user_data["created_at"] = created_at
        with pytest.raises(StructuralValidationError, match="created_at must be a positive integer"):
            UserIdentity.from_dict(sample_user_data)

    def test_unknown_type_rejected(self, sample_user_data):
        sample_user_data["type"] = "web4"
        with pytest.raises(StructuralValidationError, match="type must be one of"):
            UserIdentity.from_dict(sample_user_data)

    def test_tags_must_be_a_list(self, sample_user_data):
        sample_user_data["tags"] = {"key": "plan"}
        with pytest.raises(StructuralValidationError, match="tags must be an array"):
            UserIdentity.from_dict(sample_user_data)

    def test_wallet_user(self, sample_user_data):
        sample_user_data["type"] = UserType.WALLET
        assert UserIdentity.from_dict(sample_user_data).is_wallet_user

    def test_immutable(self, sample_user_data):
        user = UserIdentity.from_dict(sample_user_data)
        with pytest.raises(dataclasses.FrozenInstanceError):
            user.username = "other"
        assert isinstance(user.tags, tuple)
