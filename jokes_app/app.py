# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, g, request

from jokes_app.container import Container
from jokes_app.infrastructure.db import init_db
from jokes_app.shared.config import load_config
from jokes_app.shared.logging import logger, setup_logging
from jokes_app.shared.middleware.error_handler import (
    configure_error_handling,
    configure_security_headers,
)
from jokes_app.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or Container(load_config())
    config = container.config
    setup_logging(debug_mode=config.debug_logging)
    init_db(container.engine)

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.secret_key,
    )
    app.extensions["container"] = container

    @app.before_request
    def _bind_session_user() -> None:
        # Token check only; request logs and error logs read g.user_id
        g.user_id = container.session_service.get_user_id(request)

    configure_error_handling(app, config)
    configure_request_logging(app, config)
    configure_security_headers(app, config)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.jokes_controller.as_blueprint())

    @app.teardown_appcontext
    def _remove_session(_exc: BaseException | None) -> None:
        container.session_factory.remove()

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
