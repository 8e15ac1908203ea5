# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from jokes_app.application.forms import NewJokeForm
from jokes_app.application.outcomes import Outcome, Page, Redirect, Unauthorized, bad_request
from jokes_app.application.services.sessions import CookieSource, SessionService, login_url
from jokes_app.domain.exceptions import InvariantViolation
from jokes_app.domain.jokes.entities import Joke
from jokes_app.domain.jokes.repositories import JokeRepository
from jokes_app.domain.users.entities import User
from jokes_app.shared.errors.validation import field_errors
from jokes_app.shared.logging import logger

NEW_JOKE_PATH = "/jokes/new"
LOGIN_REQUIRED_MESSAGE = "You must be logged in to create a joke."


class CreateJokeUseCase:
    def __init__(self, *, jokes: JokeRepository, sessions: SessionService) -> None:
        self._jokes = jokes
        self._sessions = sessions

    def _require_user(self, request: CookieSource) -> User | Unauthorized:
        return self._sessions.require_user(
            request, redirect_to=NEW_JOKE_PATH, message=LOGIN_REQUIRED_MESSAGE
        )

    def load(self, request: CookieSource) -> Outcome:
        user = self._require_user(request)
        if isinstance(user, Unauthorized):
            return user
        return Page({})

    def execute(self, request: CookieSource, form: Mapping[str, Any]) -> Outcome:
        user = self._require_user(request)
        if isinstance(user, Unauthorized):
            logger.info("jokes.create: unauthenticated")
            return user

        name = form.get("name")
        content = form.get("content")
        try:
            dto = NewJokeForm.model_validate({"name": name, "content": content})
        except PydanticValidationError as exc:
            errors = field_errors(exc)
            logger.info(f"jokes.create: invalid (user_id={user.id}, fields={sorted(errors)})")
            if not isinstance(name, str) or not isinstance(content, str):
                return bad_request(field_errors=errors)
            return bad_request(field_errors=errors, values={"name": name, "content": content})

        values = {"name": name, "content": content}
        try:
            draft = Joke(
                id="",
                name=dto.name,
                content=dto.content,
                jokester_id=user.id,
                created_at=datetime.now(UTC),
            )
            joke = self._jokes.add(draft)
        except InvariantViolation as exc:
            if exc.field == "jokester_id":
                # Owner removed between the session check and the insert
                logger.info(f"jokes.create: owner gone (user_id={user.id})")
                return Unauthorized(LOGIN_REQUIRED_MESSAGE, login_url(NEW_JOKE_PATH))
            return bad_request(field_errors={exc.field or "name": exc.message}, values=values)

        logger.info(f"jokes.create: ok (user_id={user.id}, joke_id={joke.id})")
        return Redirect(location=f"/jokes/{joke.id}")
