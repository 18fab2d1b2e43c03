"""Tests for the tri-state payload types."""

from roster.application.commands import UNSET, ProfileInput, Unset, UserChanges, is_set


class TestUnset:
    def test_is_singleton_and_falsy(self):
        assert Unset() is UNSET
        assert not UNSET
        assert repr(UNSET) == "UNSET"

    def test_is_set_distinguishes_none(self):
        assert is_set(None) is True
        assert is_set(UNSET) is False
        assert is_set("value") is True


class TestChangeSets:
    def test_defaults_are_unset(self):
        changes = UserChanges()

        assert all(
            value is UNSET
            for value in (
                changes.name,
                changes.email,
                changes.password,
                changes.is_active,
                changes.primary_role_id,
                changes.role_ids,
                changes.profile,
            )
        )

    def test_profile_value_or_none(self):
        profile = ProfileInput(bio="Hello")

        assert profile.value_or_none("bio") == "Hello"
        assert profile.value_or_none("avatar_url") is None
