# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless cookie sessions.

The cookie holds an itsdangerous token: the user id, the issue timestamp
and an HMAC over both keyed with a server-side secret. Nothing is stored
server side; a token is valid while its signature checks out and it is
younger than ``SessionConfig.max_age``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import quote

from itsdangerous import BadSignature, URLSafeTimedSerializer

from jokes_app.application.outcomes import CookieDirective, Redirect, Unauthorized
from jokes_app.domain.users.entities import User
from jokes_app.domain.users.repositories import UserRepository
from jokes_app.shared.config import SessionConfig
from jokes_app.shared.logging import logger

DEFAULT_REDIRECT = "/jokes"


class CookieSource(Protocol):
    @property
    def cookies(self) -> Mapping[str, str]: ...


def safe_redirect_target(target: Any, default: str = DEFAULT_REDIRECT) -> str:
    """Only same-site absolute paths are honoured as redirect targets."""

    if not isinstance(target, str) or not target.startswith("/"):
        return default
    if target.startswith("//") or "\\" in target:
        return default
    return target


def login_url(redirect_to: str | None) -> str:
    if not redirect_to:
        return "/login"
    return f"/login?redirectTo={quote(redirect_to, safe='/')}"


class SessionService:
    def __init__(self, *, config: SessionConfig, secret: str, users: UserRepository) -> None:
        if not secret:
            raise ValueError("session secret must not be empty")
        self._config = config
        self._users = users
        self._serializer = URLSafeTimedSerializer(secret, salt=config.salt)

    @property
    def cookie_name(self) -> str:
        return self._config.cookie_name

    def _cookie(self, value: str, *, max_age: int | None, expires: int | None = None) -> CookieDirective:
        return CookieDirective(
            name=self._config.cookie_name,
            value=value,
            max_age=max_age,
            httponly=True,
            secure=self._config.cookie_secure,
            samesite=self._config.cookie_samesite,
            path="/",
            expires=expires,
        )

    def mint_token(self, user_id: str) -> str:
        return self._serializer.dumps({"uid": user_id})

    def create_session(self, user_id: str, redirect_to: str) -> Redirect:
        token = self.mint_token(user_id)
        logger.info(f"session.create: ok user_id={user_id}")
        return Redirect(
            location=redirect_to,
            cookies=(self._cookie(token, max_age=self._config.max_age),),
        )

    def read_token(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            payload = self._serializer.loads(token, max_age=self._config.max_age)
        except BadSignature as exc:
            # SignatureExpired is a BadSignature too
            logger.debug(f"session.read: rejected token ({type(exc).__name__})")
            return None
        if not isinstance(payload, dict):
            return None
        user_id = payload.get("uid")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id

    def get_user_id(self, request: CookieSource) -> str | None:
        return self.read_token(request.cookies.get(self._config.cookie_name))

    def require_user_id(
        self,
        request: CookieSource,
        redirect_to: str | None = None,
        message: str = "You must be logged in.",
    ) -> str | Unauthorized:
        user_id = self.get_user_id(request)
        if user_id is None:
            return Unauthorized(message=message, login_url=login_url(redirect_to))
        return user_id

    def require_user(
        self,
        request: CookieSource,
        redirect_to: str | None = None,
        message: str = "You must be logged in.",
    ) -> User | Unauthorized:
        """Like ``require_user_id`` but the user record must still exist."""

        user = self.get_user(request)
        if user is None:
            return Unauthorized(message=message, login_url=login_url(redirect_to))
        return user

    def get_user(self, request: CookieSource) -> User | None:
        user_id = self.get_user_id(request)
        if user_id is None:
            return None
        user = self._users.find_by_id(user_id)
        if user is None:
            logger.info(f"session.user: token for missing user_id={user_id}")
        return user

    def logout(self, redirect_to: str = "/") -> Redirect:
        logger.info("session.logout: ok")
        return Redirect(
            location=redirect_to,
            cookies=(self._cookie("", max_age=0, expires=0),),
        )


__all__ = ["CookieSource", "SessionService", "login_url", "safe_redirect_target"]
