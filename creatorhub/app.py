# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from creatorhub.infrastructure.container import Container
from creatorhub.shared.config import AppConfig, load_config
from creatorhub.shared.logging import logger, setup_logging
from creatorhub.shared.middleware.error_handler import configure_error_handling
from creatorhub.shared.middleware.request_logger import configure_request_logging

MAX_CONTENT_LENGTH = 16 * 1024 * 1024


def _add_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return resp


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
) -> Flask:
    """Build a Flask app around one ``Container``.

    Tests pass their own container (in-memory database, fake storage, cheap
    hasher); production calls this with no arguments.
    """

    config = config or (container.config if container else load_config())
    container = container or Container(config)

    setup_logging(debug_mode=config.debug_logging)
    container.database.create_all()

    app = Flask(__name__)
    app.config.update(MAX_CONTENT_LENGTH=MAX_CONTENT_LENGTH)

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    # Bearer tokens only, so no credentialed CORS.
    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        expose_headers=["X-Request-ID"],
    )
    _add_security_headers(app, config)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.creator_controller.as_blueprint())
    app.register_blueprint(container.upload_controller.as_blueprint())

    app.extensions["container"] = container

    logger.info(
        f"Flask app initialized env={config.app_env} api_version={config.api_version} "
        f"deletion_enabled={config.account_deletion_enabled}"
    )
    return app


def main() -> None:
    config = load_config()
    container = Container(config)
    app = create_app(config, container=container)
    try:
        app.run(host=config.host, port=config.port, debug=False)
    finally:
        container.close()


if __name__ == "__main__":
    main()
