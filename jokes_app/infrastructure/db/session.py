# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from jokes_app.shared.config import DatabaseConfig
from jokes_app.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, _record) -> None:
    # SQLite checks FOREIGN KEY / ON DELETE CASCADE only when asked, per connection
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def build_engine(config: DatabaseConfig) -> Engine:
    is_sqlite = config.url.startswith("sqlite")
    connect_args: dict[str, object] = {}
    pool_args: dict[str, object] = {}
    if is_sqlite:
        connect_args = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    if not _is_memory_sqlite(config.url):
        # SingletonThreadPool (in-memory SQLite) rejects these
        pool_args = {
            "pool_size": config.pool_size,
            "max_overflow": config.max_overflow,
            "pool_timeout": config.pool_timeout,
        }

    engine = create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
        **pool_args,
    )
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.debug(f"db.engine: built for backend={engine.dialect.name}")
    return engine


def build_session_factory(engine: Engine) -> scoped_session[Session]:
    return scoped_session(
        sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    )


def init_db(engine: Engine) -> None:
    from jokes_app.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
