# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from jokes_app.infrastructure.health import check_database
from jokes_app.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine) -> None:
        self._engine = engine

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify(
            {
                "title": "Remix: So great, it's funny!",
                "message": "Learn Remix and laugh at the same time!",
                "links": {"jokes": "/jokes", "login": "/login"},
            }
        )

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            status["backend"] = check_database(self._engine)
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed: {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "unavailable"
        return jsonify(status)
