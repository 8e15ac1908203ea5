# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response

from jokes_app.shared.config import AppConfig
from jokes_app.shared.errors import register_error_handler


def configure_error_handling(app: Flask, config: AppConfig) -> None:
    register_error_handler(app, debug_mode=config.debug_logging)


def configure_security_headers(app: Flask, config: AppConfig) -> None:
    enable_hsts = config.security.enable_hsts

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "same-origin")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        if enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp


__all__ = ["configure_error_handling", "configure_security_headers"]
