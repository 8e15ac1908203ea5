# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import random
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session

from jokes_app.application.services.credentials import CredentialService
from jokes_app.application.services.password_hashing import WerkzeugPasswordHasher
from jokes_app.application.services.sessions import SessionService
from jokes_app.application.use_cases.jokes.create_joke import CreateJokeUseCase
from jokes_app.application.use_cases.jokes.get_joke import GetJokeUseCase
from jokes_app.application.use_cases.jokes.random_joke import RandomJokeUseCase
from jokes_app.application.use_cases.users.login_action import LoginActionUseCase
from jokes_app.application.use_cases.users.logout_user import LogoutUserUseCase
from jokes_app.infrastructure.db import build_engine, build_session_factory
from jokes_app.infrastructure.repositories.jokes.sqlalchemy_joke_repository import (
    SqlAlchemyJokeRepository,
)
from jokes_app.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from jokes_app.interfaces.http.controllers.auth_controller import AuthController
from jokes_app.interfaces.http.controllers.jokes_controller import JokesController
from jokes_app.interfaces.http.controllers.misc_controller import MiscController
from jokes_app.shared.config import AppConfig


class Container:
    """Wires repositories, services and controllers from one read-only config."""

    def __init__(self, config: AppConfig, *, rng: random.Random | None = None) -> None:
        self.config = config
        self._rng = rng

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> scoped_session[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def joke_repository(self) -> SqlAlchemyJokeRepository:
        return SqlAlchemyJokeRepository(self.session_factory)

    @cached_property
    def credential_service(self) -> CredentialService:
        return CredentialService(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def session_service(self) -> SessionService:
        return SessionService(
            config=self.config.session,
            secret=self.config.session_secret,
            users=self.user_repository,
        )

    # Use cases

    @cached_property
    def login_action_use_case(self) -> LoginActionUseCase:
        return LoginActionUseCase(
            credentials=self.credential_service, sessions=self.session_service
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_service)

    @cached_property
    def random_joke_use_case(self) -> RandomJokeUseCase:
        return RandomJokeUseCase(
            jokes=self.joke_repository, sessions=self.session_service, rng=self._rng
        )

    @cached_property
    def get_joke_use_case(self) -> GetJokeUseCase:
        return GetJokeUseCase(jokes=self.joke_repository)

    @cached_property
    def create_joke_use_case(self) -> CreateJokeUseCase:
        return CreateJokeUseCase(jokes=self.joke_repository, sessions=self.session_service)

    # Controllers

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_action_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def jokes_controller(self) -> JokesController:
        return JokesController(
            random_joke_use_case=self.random_joke_use_case,
            get_joke_use_case=self.get_joke_use_case,
            create_joke_use_case=self.create_joke_use_case,
        )
