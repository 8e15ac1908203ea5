# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jokes_app.domain.exceptions import InvariantViolation
from jokes_app.domain.jokes.entities import Joke as DomainJoke
from jokes_app.domain.jokes.repositories import JokeRepository
from jokes_app.infrastructure.db.models import Joke
from jokes_app.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Joke) -> DomainJoke:
    return DomainJoke(
        id=row.id,
        name=row.name,
        content=row.content,
        jokester_id=row.jokester_id,
        created_at=row.created_at,
    )


class SqlAlchemyJokeRepository(JokeRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def add(self, joke: DomainJoke) -> DomainJoke:
        with unit_of_work_scope(self._session_factory, "jokes.add") as session:
            row = Joke(name=joke.name, content=joke.content, jokester_id=joke.jokester_id)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                raise InvariantViolation(
                    "joke owner does not exist", field="jokester_id"
                ) from exc
            session.refresh(row)
            return _to_domain(row)

    def find_by_id(self, joke_id: str) -> DomainJoke | None:
        with unit_of_work_scope(self._session_factory, "jokes.find_by_id") as session:
            row = session.get(Joke, joke_id)
            return _to_domain(row) if row else None

    def count(self) -> int:
        with unit_of_work_scope(self._session_factory, "jokes.count") as session:
            return int(session.scalar(select(func.count()).select_from(Joke)) or 0)

    def find_at_offset(self, offset: int) -> DomainJoke | None:
        with unit_of_work_scope(self._session_factory, "jokes.find_at_offset") as session:
            row = session.scalars(
                select(Joke).order_by(Joke.created_at.asc(), Joke.id.asc()).offset(offset).limit(1)
            ).first()
            return _to_domain(row) if row else None

    def list_recent(self, limit: int) -> Sequence[DomainJoke]:
        with unit_of_work_scope(self._session_factory, "jokes.list_recent") as session:
            rows = session.scalars(
                select(Joke).order_by(Joke.created_at.desc(), Joke.id.desc()).limit(limit)
            ).all()
            return [_to_domain(row) for row in rows]
