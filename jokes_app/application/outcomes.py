# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Tagged results returned by request handlers.

Handlers never raise to signal 400/401/404; they return one of the
outcome types below and the HTTP boundary maps the tag to a status code.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(slots=True, frozen=True)
class CookieDirective:
    name: str
    value: str
    max_age: int | None
    httponly: bool = True
    secure: bool = False
    samesite: str = "Lax"
    path: str = "/"
    expires: int | None = None


class ActionData(BaseModel):
    """Payload of a rejected form submission."""

    field_errors: dict[str, str] | None = Field(None, alias="fieldErrors")
    form_error: str | None = Field(None, alias="formError")
    values: dict[str, str] | None = None

    model_config = ConfigDict(validate_by_name=True, frozen=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(slots=True, frozen=True)
class Page:
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Redirect:
    location: str
    cookies: tuple[CookieDirective, ...] = ()


@dataclass(slots=True, frozen=True)
class BadRequest:
    action_data: ActionData


@dataclass(slots=True, frozen=True)
class Unauthorized:
    message: str = "You must be logged in."
    login_url: str = "/login"


@dataclass(slots=True, frozen=True)
class NotFound:
    message: str = "Not found."


Outcome = Page | Redirect | BadRequest | Unauthorized | NotFound


def bad_request(
    *,
    field_errors: Mapping[str, str | None] | None = None,
    form_error: str | None = None,
    values: Mapping[str, str] | None = None,
) -> BadRequest:
    """Build a 400 outcome, dropping field entries that carry no error."""

    errors = None
    if field_errors is not None:
        errors = {name: message for name, message in field_errors.items() if message}
    return BadRequest(
        ActionData(
            field_errors=errors,
            form_error=form_error,
            values=dict(values) if values is not None else None,
        )
    )


__all__ = [
    "ActionData",
    "BadRequest",
    "CookieDirective",
    "NotFound",
    "Outcome",
    "Page",
    "Redirect",
    "Unauthorized",
    "bad_request",
]
