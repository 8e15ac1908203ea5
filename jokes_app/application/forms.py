# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Form models for submitted fields.

Every field accepts anything and is checked in two steps: presence as a
string, then the length rule. pydantic collects the failures of all
fields, so callers see every field error at once.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from jokes_app.domain import (
    CONTENT_MIN_LENGTH,
    NAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
    USERNAME_MIN_LENGTH,
)


def _require_string(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("missing", message)
    return value


def _require_length(value: str, min_length: int, message: str) -> str:
    if len(value) < min_length:
        raise PydanticCustomError("too_short", message, {"min_length": min_length})
    return value


class NewJokeForm(BaseModel):
    name: str | None = Field(None, validate_default=True)
    content: str | None = Field(None, validate_default=True)

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("name", mode="before")
    @classmethod
    def _name_present(cls, value: Any) -> str:
        return _require_string(value, "You must provide a name")

    @field_validator("name")
    @classmethod
    def _name_length(cls, value: str) -> str:
        return _require_length(value, NAME_MIN_LENGTH, "That joke's name is too short")

    @field_validator("content", mode="before")
    @classmethod
    def _content_present(cls, value: Any) -> str:
        return _require_string(value, "You must provide a joke content")

    @field_validator("content")
    @classmethod
    def _content_length(cls, value: str) -> str:
        return _require_length(value, CONTENT_MIN_LENGTH, "That joke is too short")


class CredentialsForm(BaseModel):
    username: str | None = Field(None, validate_default=True)
    password: str | None = Field(None, validate_default=True)

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("username", mode="before")
    @classmethod
    def _username_present(cls, value: Any) -> str:
        return _require_string(value, "You must provide a username")

    @field_validator("username")
    @classmethod
    def _username_length(cls, value: str) -> str:
        return _require_length(
            value,
            USERNAME_MIN_LENGTH,
            f"Username must be at least {USERNAME_MIN_LENGTH} characters",
        )

    @field_validator("password", mode="before")
    @classmethod
    def _password_present(cls, value: Any) -> str:
        return _require_string(value, "You must provide a password")

    @field_validator("password")
    @classmethod
    def _password_length(cls, value: str) -> str:
        return _require_length(
            value,
            PASSWORD_MIN_LENGTH,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
        )


__all__ = ["CredentialsForm", "NewJokeForm"]
