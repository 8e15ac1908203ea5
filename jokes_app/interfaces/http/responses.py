# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Boundary turning handler outcomes into Flask responses."""

from __future__ import annotations

from http import HTTPStatus

from flask import Response, jsonify, redirect

from jokes_app.application.outcomes import (
    BadRequest,
    NotFound,
    Outcome,
    Page,
    Redirect,
    Unauthorized,
)


def _redirect(outcome: Redirect) -> Response:
    response = redirect(outcome.location, code=HTTPStatus.FOUND)
    for cookie in outcome.cookies:
        response.set_cookie(
            cookie.name,
            cookie.value,
            max_age=cookie.max_age,
            expires=cookie.expires,
            path=cookie.path,
            secure=cookie.secure,
            httponly=cookie.httponly,
            samesite=cookie.samesite,
        )
    return response


def to_response(outcome: Outcome) -> Response | tuple[Response, HTTPStatus]:
    if isinstance(outcome, Redirect):
        return _redirect(outcome)
    if isinstance(outcome, Page):
        return jsonify(dict(outcome.data)), HTTPStatus.OK
    if isinstance(outcome, BadRequest):
        return jsonify(outcome.action_data.to_payload()), HTTPStatus.BAD_REQUEST
    if isinstance(outcome, Unauthorized):
        payload = {"error": "unauthorized", "message": outcome.message, "login": outcome.login_url}
        return jsonify(payload), HTTPStatus.UNAUTHORIZED
    if isinstance(outcome, NotFound):
        return jsonify({"error": "not_found", "message": outcome.message}), HTTPStatus.NOT_FOUND
    raise TypeError(f"unsupported outcome: {type(outcome).__name__}")


__all__ = ["to_response"]
