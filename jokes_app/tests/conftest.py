from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime
from itertools import count

_TMP_DIR = tempfile.mkdtemp(prefix="jokes-app-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402

from jokes_app.application.services.credentials import CredentialService  # noqa: E402
from jokes_app.application.services.sessions import SessionService  # noqa: E402
from jokes_app.domain.jokes.entities import Joke  # noqa: E402
from jokes_app.domain.jokes.repositories import JokeRepository  # noqa: E402
from jokes_app.domain.users.entities import User  # noqa: E402
from jokes_app.domain.users.exceptions import ConflictError  # noqa: E402
from jokes_app.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402
from jokes_app.infrastructure.db import build_engine, build_session_factory, init_db  # noqa: E402
from jokes_app.shared.config import DatabaseConfig, SessionConfig  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = count(1)

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_id(self, user_id: str) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise ConflictError(user.username)
        new_user = replace(user, id=f"user-{next(self._seq)}")
        self._users[new_user.username] = new_user
        return new_user


class InMemoryJokeRepository(JokeRepository):
    def __init__(self) -> None:
        self.rows: list[Joke] = []
        self._seq = count(1)
        self.offsets: list[int] = []

    def add(self, joke: Joke) -> Joke:
        new_joke = replace(joke, id=f"joke-{next(self._seq)}")
        self.rows.append(new_joke)
        return new_joke

    def find_by_id(self, joke_id: str) -> Joke | None:
        return next((j for j in self.rows if j.id == joke_id), None)

    def count(self) -> int:
        return len(self.rows)

    def find_at_offset(self, offset: int) -> Joke | None:
        self.offsets.append(offset)
        if 0 <= offset < len(self.rows):
            return self.rows[offset]
        return None

    def list_recent(self, limit: int) -> Sequence[Joke]:
        return list(reversed(self.rows))[:limit]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class CookieRequest:
    def __init__(self, cookies: dict[str, str] | None = None) -> None:
        self.cookies = cookies or {}


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def jokes() -> InMemoryJokeRepository:
    return InMemoryJokeRepository()


@pytest.fixture()
def session_config() -> SessionConfig:
    return SessionConfig(cookie_name="RJ_session", max_age=3600, salt="tests")


@pytest.fixture()
def sessions(session_config: SessionConfig, users: InMemoryUserRepository) -> SessionService:
    return SessionService(config=session_config, secret="s3cr3t", users=users)


@pytest.fixture()
def credentials(users: InMemoryUserRepository) -> CredentialService:
    return CredentialService(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def signed_in(sessions: SessionService, users: InMemoryUserRepository):
    """Request carrying a valid session cookie for a stored user."""

    user = users.add(
        User(id="", username="kody", password_hash="hashed:twixrox", created_at=datetime.now(UTC))
    )
    token = sessions.mint_token(user.id)
    return user, CookieRequest({"RJ_session": token})


@pytest.fixture()
def make_request():
    return CookieRequest


@pytest.fixture()
def database_config(tmp_path) -> DatabaseConfig:
    return DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'jokes.db'}")


@pytest.fixture()
def session_factory(database_config: DatabaseConfig):
    """Scoped session factory over a fresh SQLite file with the schema created."""

    engine = build_engine(database_config)
    init_db(engine)
    factory = build_session_factory(engine)
    yield factory
    factory.remove()
    engine.dispose()
