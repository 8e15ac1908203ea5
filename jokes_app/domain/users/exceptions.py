# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from jokes_app.shared.errors.base import DomainError


class ConflictError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT

    def __init__(self, username: str) -> None:
        super().__init__(context={"username": username})
        self.username = username


class AuthError(DomainError):
    code = "invalid_credentials"

