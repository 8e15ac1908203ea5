# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jokes_app.domain.users.entities import User as DomainUser
from jokes_app.domain.users.exceptions import ConflictError
from jokes_app.domain.users.repositories import UserRepository
from jokes_app.infrastructure.db.models import User
from jokes_app.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_username") as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find_by_id") as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory, "users.add") as session:
            row = User(username=user.username, password_hash=user.password_hash)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                raise ConflictError(user.username) from exc
            session.refresh(row)
            return _to_domain(row)
