# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import random

from jokes_app.application.outcomes import NotFound, Outcome, Page
from jokes_app.application.services.sessions import CookieSource, SessionService
from jokes_app.domain.jokes.entities import Joke
from jokes_app.domain.jokes.repositories import JokeRepository
from jokes_app.shared.logging import logger

JOKE_LIST_LIMIT = 5
NO_JOKES_MESSAGE = "There are no jokes to display."


class RandomJokeUseCase:
    """Data for the jokes index: one random joke, recent jokes, current user."""

    def __init__(
        self,
        *,
        jokes: JokeRepository,
        sessions: SessionService,
        rng: random.Random | None = None,
    ) -> None:
        self._jokes = jokes
        self._sessions = sessions
        self._rng = rng or random.Random()

    def pick(self) -> Joke | None:
        count = self._jokes.count()
        if count == 0:
            return None
        return self._jokes.find_at_offset(self._rng.randrange(count))

    def execute(self, request: CookieSource) -> Outcome:
        joke = self.pick()
        if joke is None:
            logger.info("jokes.random: empty store")
            return NotFound(NO_JOKES_MESSAGE)

        user = self._sessions.get_user(request)
        return Page(
            {
                "randomJoke": {"id": joke.id, "name": joke.name, "content": joke.content},
                "jokeListItems": [j.list_item() for j in self._jokes.list_recent(JOKE_LIST_LIMIT)],
                "user": {"id": user.id, "username": user.username} if user else None,
            }
        )
