# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, redirect, request

from jokes_app.application.use_cases.users.login_action import LoginActionUseCase
from jokes_app.application.use_cases.users.logout_user import LogoutUserUseCase
from jokes_app.interfaces.http.responses import to_response


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginActionUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    def login_page(self):
        return to_response(self._login_use_case.load(request.args))

    def login(self):
        return to_response(self._login_use_case.execute(request.form))

    def logout(self):
        return to_response(self._logout_use_case.execute())

    def logout_page(self):
        return redirect("/")

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login_page, methods=["GET"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout_page, methods=["GET"])
        return bp
