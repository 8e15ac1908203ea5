# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from jokes_app.application.outcomes import NotFound, Outcome, Page
from jokes_app.domain.jokes.repositories import JokeRepository

JOKE_NOT_FOUND_MESSAGE = "What a joke! Not found."


class GetJokeUseCase:
    def __init__(self, *, jokes: JokeRepository) -> None:
        self._jokes = jokes

    def execute(self, joke_id: str) -> Outcome:
        joke = self._jokes.find_by_id(joke_id)
        if joke is None:
            return NotFound(JOKE_NOT_FOUND_MESSAGE)
        return Page({"joke": joke.to_dict()})
