# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from jokes_app.domain.exceptions import InvariantViolation

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6


@dataclass(slots=True, frozen=True)
class User:
    """Registered jokester. ``id`` is empty until the store assigns one."""

    id: str
    username: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.username:
            raise InvariantViolation("username must not be empty", field="username")
        if not self.password_hash:
            raise InvariantViolation("password hash must not be empty", field="password_hash")
