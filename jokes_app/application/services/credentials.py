# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from jokes_app.domain.users.entities import User
from jokes_app.domain.users.exceptions import AuthError, ConflictError
from jokes_app.domain.users.repositories import PasswordHasher, UserRepository
from jokes_app.shared.logging import logger


class CredentialService:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def register(self, username: str, password: str) -> User:
        if self._users.find_by_username(username):
            logger.info(f"credentials.register: taken username={username}")
            raise ConflictError(username)
        hashed = self._password_hasher.hash(password)
        user = User(id="", username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        logger.info(f"credentials.register: ok user_id={persisted.id}")
        return persisted

    def login(self, username: str, password: str) -> User:
        user = self._users.find_by_username(username)
        if user is None:
            logger.info(f"credentials.login: unknown username={username}")
            raise AuthError()
        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"credentials.login: bad password user_id={user.id}")
            raise AuthError()
        logger.info(f"credentials.login: ok user_id={user.id}")
        return user
