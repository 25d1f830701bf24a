"""Tests for shared/models.py."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from shared.models import AuthenticatedUser, RoleFlags


class TestRoleFlags:
    def test_defaults_to_plain_user(self):
        flags = RoleFlags()
        assert flags.is_super_admin is False
        assert flags.is_admin is False
        assert flags.has_admin_access is False

    @pytest.mark.parametrize(
        "is_super_admin,is_admin,expected",
        [(True, True, True), (True, False, True), (False, True, True), (False, False, False)],
    )
    def test_has_admin_access(self, is_super_admin, is_admin, expected):
        flags = RoleFlags(is_super_admin=is_super_admin, is_admin=is_admin)
        assert flags.has_admin_access is expected

    def test_is_frozen(self):
        flags = RoleFlags()
        with pytest.raises(PydanticValidationError):
            flags.is_admin = True


class TestAuthenticatedUser:
    def test_role_properties_read_resolved_flags(self):
        user = AuthenticatedUser(
            id="u-1",
            email="a@x.com",
            roles=RoleFlags(is_super_admin=True, is_admin=True),
        )
        assert user.is_super_admin is True
        assert user.is_admin is True

    def test_defaults(self):
        user = AuthenticatedUser(id="u-1", email="a@x.com")
        assert user.name == ""
        assert user.has_password is False
        assert user.roles == RoleFlags()

    def test_ignores_extra_fields(self):
        user = AuthenticatedUser(id="u-1", email="a@x.com", tier="free")
        assert not hasattr(user, "tier")

    def test_is_frozen(self):
        user = AuthenticatedUser(id="u-1", email="a@x.com")
        with pytest.raises(PydanticValidationError):
            user.email = "b@x.com"
