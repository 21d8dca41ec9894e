import pytest

from app.entitlement.policy import AdminPolicy, parse_email_list
from app.identity.schema import IdentityUser


def test_parse_email_list_normalizes_entries():
    assert parse_email_list(" Admin@Chef.com, ,outro@x.com ") == ["admin@chef.com", "outro@x.com"]
    assert parse_email_list("") == []
    assert parse_email_list(None) == []


@pytest.mark.parametrize("email, expected", [
    ("admin@chef.com", True),
    ("ADMIN@CHEF.COM ", True),
    ("outro@chef.com", False),
    ("", False),
    (None, False),
])
def test_is_email_admin(email, expected):
    assert AdminPolicy(["Admin@Chef.com"]).is_email_admin(email) is expected


def test_empty_allow_list_has_no_admins():
    assert not AdminPolicy().is_email_admin("admin@chef.com")


@pytest.mark.parametrize("app_metadata, expected", [
    ({"admin": True}, True),
    ({"role": "admin"}, True),
    ({"admin": "true"}, False),
    ({"role": "editor"}, False),
    ({}, False),
])
def test_is_admin_user_accepts_metadata_marker(app_metadata, expected):
    """Fora da allow-list, só o marcador em app_metadata concede acesso."""
    user = IdentityUser(id="u", email="qualquer@x.com", app_metadata=app_metadata)
    assert AdminPolicy().is_admin_user(user) is expected


def test_is_admin_user_handles_missing_user():
    assert AdminPolicy(["a@x.com"]).is_admin_user(None) is False
