from __future__ import annotations

import time

import pytest

from jokes_app.application.outcomes import Redirect, Unauthorized
from jokes_app.application.services.sessions import SessionService, safe_redirect_target
from jokes_app.shared.config import SessionConfig


def _tamper(token: str) -> str:
    body, signature = token.rsplit(".", 1)
    first = "B" if signature[0] == "A" else "A"
    return f"{body}.{first}{signature[1:]}"


def test_create_session_sets_http_only_cookie(sessions: SessionService) -> None:
    outcome = sessions.create_session("user-7", "/jokes/new")

    assert isinstance(outcome, Redirect)
    assert outcome.location == "/jokes/new"
    (cookie,) = outcome.cookies
    assert cookie.name == "RJ_session"
    assert cookie.httponly is True
    assert cookie.max_age == 3600
    assert cookie.value


def test_token_round_trip(sessions: SessionService, make_request) -> None:
    cookie = sessions.create_session("user-7", "/").cookies[0]

    assert sessions.get_user_id(make_request({"RJ_session": cookie.value})) == "user-7"


def test_tampered_signature_is_absent(sessions: SessionService, make_request) -> None:
    token = sessions.mint_token("user-7")

    assert sessions.get_user_id(make_request({"RJ_session": _tamper(token)})) is None


@pytest.mark.parametrize("value", ["", "garbage", "a.b.c", "eyJ1aWQiOjF9.x.y"])
def test_malformed_cookie_is_absent(sessions: SessionService, make_request, value: str) -> None:
    assert sessions.get_user_id(make_request({"RJ_session": value})) is None


def test_missing_cookie_is_absent(sessions: SessionService, make_request) -> None:
    assert sessions.get_user_id(make_request()) is None


def test_token_signed_with_other_secret_is_absent(
    session_config: SessionConfig, users, make_request
) -> None:
    other = SessionService(config=session_config, secret="another-secret", users=users)
    token = other.mint_token("user-7")
    sessions = SessionService(config=session_config, secret="s3cr3t", users=users)

    assert sessions.get_user_id(make_request({"RJ_session": token})) is None


def test_expired_token_is_absent(
    sessions: SessionService, make_request, monkeypatch: pytest.MonkeyPatch
) -> None:
    token = sessions.mint_token("user-7")
    issued = time.time()
    monkeypatch.setattr(time, "time", lambda: issued + 3600 + 5)

    assert sessions.get_user_id(make_request({"RJ_session": token})) is None


def test_require_user_id_returns_unauthorized(sessions: SessionService, make_request) -> None:
    outcome = sessions.require_user_id(make_request(), redirect_to="/jokes/new")

    assert isinstance(outcome, Unauthorized)
    assert outcome.login_url == "/login?redirectTo=/jokes/new"


def test_require_user_id_returns_id(sessions: SessionService, signed_in) -> None:
    user, request = signed_in

    assert sessions.require_user_id(request) == user.id


def test_get_user_resolves_record(sessions: SessionService, signed_in, make_request) -> None:
    user, request = signed_in

    assert sessions.get_user(request) == user
    orphan = sessions.mint_token("user-404")
    assert sessions.get_user(make_request({"RJ_session": orphan})) is None


def test_logout_clears_cookie(sessions: SessionService) -> None:
    outcome = sessions.logout()

    assert outcome.location == "/"
    (cookie,) = outcome.cookies
    assert cookie.name == "RJ_session"
    assert cookie.value == ""
    assert cookie.max_age == 0


def test_empty_secret_rejected(session_config: SessionConfig, users) -> None:
    with pytest.raises(ValueError):
        SessionService(config=session_config, secret="", users=users)


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("/jokes/new", "/jokes/new"),
        ("/", "/"),
        (None, "/jokes"),
        ("", "/jokes"),
        ("https://evil.example", "/jokes"),
        ("//evil.example", "/jokes"),
        ("/\\evil.example", "/jokes"),
    ],
)
def test_safe_redirect_target(target, expected: str) -> None:
    assert safe_redirect_target(target) == expected


def test_require_user_needs_existing_record(
    sessions: SessionService, signed_in, make_request
) -> None:
    user, request = signed_in

    assert sessions.require_user(request) == user
    orphan = make_request({"RJ_session": sessions.mint_token("user-404")})
    outcome = sessions.require_user(orphan, redirect_to="/jokes/new")
    assert isinstance(outcome, Unauthorized)
    assert outcome.login_url == "/login?redirectTo=/jokes/new"
