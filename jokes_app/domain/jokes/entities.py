# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from jokes_app.domain.exceptions import InvariantViolation

NAME_MIN_LENGTH = 10
CONTENT_MIN_LENGTH = 10


@dataclass(slots=True, frozen=True)
class Joke:
    """A joke owned by the user referenced by ``jokester_id``."""

    id: str
    name: str
    content: str
    jokester_id: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvariantViolation("joke name must not be blank", field="name")
        if not self.content.strip():
            raise InvariantViolation("joke content must not be blank", field="content")
        if not self.jokester_id:
            raise InvariantViolation("joke must have an owner", field="jokester_id")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "jokesterId": self.jokester_id,
            "createdAt": self.created_at.isoformat(),
        }

    def list_item(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}
