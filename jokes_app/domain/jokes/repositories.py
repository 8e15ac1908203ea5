# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Joke


class JokeRepository(Protocol):
    def add(self, joke: Joke) -> Joke: ...
    def find_by_id(self, joke_id: str) -> Joke | None: ...
    def count(self) -> int: ...
    def find_at_offset(self, offset: int) -> Joke | None: ...
    def list_recent(self, limit: int) -> Sequence[Joke]: ...
