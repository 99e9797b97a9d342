from types import SimpleNamespace

import pytest

from swadesh.core.flags import get_flags
from swadesh.core.session import (
    SESSION_USER_KEY,
    Anonymous,
    Authenticated,
    Guest,
    is_guest_request,
    resolve_identity,
)


def _request(headers=None, session=None):
    scope = {} if session is None else {"session": session}
    return SimpleNamespace(headers=headers or {}, scope=scope)


async def _found(user_id):
    return SimpleNamespace(id=user_id)


async def _missing(user_id):
    return None


async def _exploding(user_id):
    raise RuntimeError("db down")


@pytest.fixture(autouse=True)
def flags(monkeypatch):
    monkeypatch.setenv("FF_ENABLE_GUEST_MODE", "true")
    get_flags.cache_clear()
    yield
    get_flags.cache_clear()


async def test_guest_header_wins_over_session():
    async def must_not_run(user_id):
        raise AssertionError("guest resolution must not touch storage")

    request = _request({"x-guest-mode": "true"}, {SESSION_USER_KEY: "u1"})
    assert await resolve_identity(request, must_not_run) == Guest()


async def test_guest_header_ignored_when_disabled(monkeypatch):
    monkeypatch.setenv("FF_ENABLE_GUEST_MODE", "false")
    get_flags.cache_clear()
    request = _request({"x-guest-mode": "true"})
    assert await resolve_identity(request, _found) == Anonymous()


async def test_session_user_that_exists():
    request = _request(session={SESSION_USER_KEY: "u1"})
    assert await resolve_identity(request, _found) == Authenticated("u1")


async def test_session_user_that_was_deleted():
    request = _request(session={SESSION_USER_KEY: "u1"})
    assert await resolve_identity(request, _missing) == Anonymous()


async def test_no_session():
    assert await resolve_identity(_request(), _found) == Anonymous()


async def test_no_persistence():
    request = _request(session={SESSION_USER_KEY: "u1"})
    assert await resolve_identity(request, None) == Anonymous()


async def test_lookup_failure_is_anonymous_and_flagged():
    request = _request(session={SESSION_USER_KEY: "u1"})
    identity = await resolve_identity(request, _exploding)
    assert identity == Anonymous(lookup_failed=True)


async def test_plain_anonymous_is_not_flagged():
    assert (await resolve_identity(_request(), _found)).lookup_failed is False


@pytest.mark.parametrize("value,expected", [
    ("true", True), ("TRUE", True), ("1", True), ("yes", True),
    ("false", False), ("", False),
])
def test_is_guest_request(value, expected):
    assert is_guest_request({"x-guest-mode": value}) is expected
