# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from jokes_app.shared.logging import logger

from .base import AppError, InfrastructureError

GENERIC_ERROR_MESSAGE = "Something unexpected went wrong. Sorry about that."


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    payload = error.to_dict()
    if isinstance(error, InfrastructureError):
        # Store details stay in the log
        payload = {"error": error.code, "message": GENERIC_ERROR_MESSAGE}
    return jsonify(payload), error.status


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.code} on {request.method} {request.path}: {exc.context}")
        else:
            logger.warning(f"Handled application error {exc.code} on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.get_data())}"
            )
        else:
            logger.error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}, user={user_id}"
            )

        response = jsonify({"error": "internal_error", "message": GENERIC_ERROR_MESSAGE})
        return response, default_status
