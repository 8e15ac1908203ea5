# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError


def _field_name(error: Any) -> str:
    loc = error.get("loc", ())
    return ".".join(str(part) for part in loc if part is not None) or "unknown"


def field_errors(exc: PydanticValidationError) -> dict[str, str]:
    """Map each failing field to the message of its first error."""

    result: dict[str, str] = {}
    for error in exc.errors():
        result.setdefault(_field_name(error), error.get("msg", "Invalid value"))
    return result


__all__ = ["field_errors"]
