"""Tests for request schemas that build tri-state change sets."""

from uuid import UUID

import pytest
from pydantic import ValidationError

from roster.application.commands import UNSET
from roster.presentation.api.schemas.roles import UpdateRoleRequest
from roster.presentation.api.schemas.users import ProfilePayload, UpdateUserRequest

ROLE_ID = UUID("22222222-2222-2222-2222-222222222222")


class TestUpdateUserRequest:
    def test_absent_fields_become_unset(self):
        changes = UpdateUserRequest.model_validate({"name": "Alice"}).to_changes()

        assert changes.name == "Alice"
        assert changes.email is UNSET
        assert changes.role_ids is UNSET
        assert changes.profile is UNSET

    def test_explicit_nulls_are_kept(self):
        changes = UpdateUserRequest.model_validate(
            {"primary_role_id": None, "role_ids": None, "profile": None},
        ).to_changes()

        assert changes.primary_role_id is None
        assert changes.role_ids is None
        assert changes.profile is None

    def test_nested_profile_is_tri_state(self):
        changes = UpdateUserRequest.model_validate(
            {"profile": {"bio": None}, "role_ids": [str(ROLE_ID)]},
        ).to_changes()

        assert changes.profile.bio is None
        assert changes.profile.avatar_url is UNSET
        assert changes.role_ids == [ROLE_ID]


class TestProfilePayload:
    def test_rejects_non_http_avatar(self):
        with pytest.raises(ValidationError):
            ProfilePayload(avatar_url="ftp://files.test/a.png")

    def test_accepts_https_avatar(self):
        payload = ProfilePayload(avatar_url="https://img.test/a.png")

        assert payload.to_input().avatar_url == "https://img.test/a.png"
        assert payload.to_input().bio is UNSET


class TestUpdateRoleRequest:
    def test_description_null_clears(self):
        changes = UpdateRoleRequest.model_validate({"description": None}).to_changes()

        assert changes.description is None
        assert changes.name is UNSET
