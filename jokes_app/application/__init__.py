# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .outcomes import (
    ActionData,
    BadRequest,
    CookieDirective,
    NotFound,
    Outcome,
    Page,
    Redirect,
    Unauthorized,
)
from .services.credentials import CredentialService
from .services.sessions import SessionService

__all__ = [
    "ActionData",
    "BadRequest",
    "CookieDirective",
    "CredentialService",
    "NotFound",
    "Outcome",
    "Page",
    "Redirect",
    "SessionService",
    "Unauthorized",
]
