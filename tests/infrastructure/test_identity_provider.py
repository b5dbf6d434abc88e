"""Header Identity Provider: tests for resolving identity from request headers."""

from lendshelf.infrastructure.identity_provider import HeaderIdentityProvider


def _provider() -> HeaderIdentityProvider:
    return HeaderIdentityProvider("X-User-Id", "X-User-Email")


def test_missing_header_is_anonymous():
    assert _provider().current_identity({}) is None


def test_blank_header_is_anonymous():
    assert _provider().current_identity({"X-User-Id": "   "}) is None


def test_overlong_id_is_anonymous():
    assert _provider().current_identity({"X-User-Id": "x" * 65}) is None


def test_identity_with_email():
    identity = _provider().current_identity(
        {"X-User-Id": " user-1 ", "X-User-Email": "u@x.com"},
    )
    assert identity.id == "user-1"
    assert identity.email == "u@x.com"


def test_email_optional():
    identity = _provider().current_identity({"X-User-Id": "user-1"})
    assert identity.email is None
