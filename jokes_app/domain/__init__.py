# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation
from .jokes.entities import CONTENT_MIN_LENGTH, NAME_MIN_LENGTH, Joke
from .users.entities import PASSWORD_MIN_LENGTH, USERNAME_MIN_LENGTH, User

__all__ = [
    "CONTENT_MIN_LENGTH",
    "InvariantViolation",
    "Joke",
    "NAME_MIN_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "USERNAME_MIN_LENGTH",
    "User",
]
