# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, request

from jokes_app.application.use_cases.jokes.create_joke import CreateJokeUseCase
from jokes_app.application.use_cases.jokes.get_joke import GetJokeUseCase
from jokes_app.application.use_cases.jokes.random_joke import RandomJokeUseCase
from jokes_app.interfaces.http.responses import to_response


class JokesController:
    def __init__(
        self,
        *,
        random_joke_use_case: RandomJokeUseCase,
        get_joke_use_case: GetJokeUseCase,
        create_joke_use_case: CreateJokeUseCase,
    ) -> None:
        self._random_joke = random_joke_use_case
        self._get_joke = get_joke_use_case
        self._create_joke = create_joke_use_case

    def index(self):
        return to_response(self._random_joke.execute(request))

    def new_form(self):
        return to_response(self._create_joke.load(request))

    def create(self):
        return to_response(self._create_joke.execute(request, request.form))

    def detail(self, joke_id: str):
        return to_response(self._get_joke.execute(joke_id))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("jokes", __name__, url_prefix="/jokes")
        bp.add_url_rule("", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/new", view_func=self.new_form, methods=["GET"])
        bp.add_url_rule("/new", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<joke_id>", view_func=self.detail, methods=["GET"])
        return bp
