# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from jokes_app.application.forms import CredentialsForm
from jokes_app.application.outcomes import Outcome, Page, bad_request
from jokes_app.application.services.credentials import CredentialService
from jokes_app.application.services.sessions import SessionService, safe_redirect_target
from jokes_app.domain.users.exceptions import AuthError, ConflictError
from jokes_app.shared.errors.validation import field_errors
from jokes_app.shared.logging import logger

LOGIN = "login"
REGISTER = "register"


class LoginActionUseCase:
    """Login or registration form, branching on ``loginType``."""

    def __init__(self, *, credentials: CredentialService, sessions: SessionService) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def load(self, query: Mapping[str, Any]) -> Outcome:
        return Page({"redirectTo": safe_redirect_target(query.get("redirectTo"))})

    def execute(self, form: Mapping[str, Any]) -> Outcome:
        login_type = form.get("loginType")
        username = form.get("username")
        password = form.get("password")
        redirect_to = safe_redirect_target(form.get("redirectTo") or None)

        try:
            dto = CredentialsForm.model_validate({"username": username, "password": password})
        except PydanticValidationError as exc:
            errors = field_errors(exc)
            logger.info(f"auth.form: invalid fields={sorted(errors)}")
            if not isinstance(username, str) or not isinstance(password, str):
                return bad_request(field_errors=errors)
            if not isinstance(login_type, str):
                return bad_request(form_error="Form not submitted correctly")
            return bad_request(
                field_errors=errors,
                values={"username": username, "password": password, "loginType": login_type},
            )

        if not isinstance(login_type, str):
            return bad_request(form_error="Form not submitted correctly")

        values = {"username": dto.username, "password": dto.password, "loginType": login_type}

        if login_type == LOGIN:
            try:
                user = self._credentials.login(dto.username, dto.password)
            except AuthError:
                return bad_request(
                    values=values,
                    form_error="Username/Password combination is incorrect",
                )
            return self._sessions.create_session(user.id, redirect_to)

        if login_type == REGISTER:
            try:
                user = self._credentials.register(dto.username, dto.password)
            except ConflictError:
                return bad_request(
                    values=values,
                    field_errors={
                        "username": f"User with username {dto.username} already exists"
                    },
                )
            return self._sessions.create_session(user.id, redirect_to)

        logger.info(f"auth.form: invalid loginType={login_type!r}")
        return bad_request(values=values, form_error="Login type invalid")
