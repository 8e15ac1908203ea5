# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for ending the cookie session."""

from __future__ import annotations

from jokes_app.application.outcomes import Redirect
from jokes_app.application.services.sessions import SessionService


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionService) -> None:
        self._sessions = sessions

    def execute(self) -> Redirect:
        return self._sessions.logout("/")
