# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine


def check_database(engine: Engine) -> str:
    """Round-trip ``SELECT 1``; returns the dialect name on success."""

    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return engine.dialect.name


__all__ = ["check_database"]
