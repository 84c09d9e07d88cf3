# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from creatorhub.shared.logging import logger
from creatorhub.shared.middleware.request_logger import client_ip

from .base import AppError, ErrorKind


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.kind is ErrorKind.INTERNAL_ERROR:
            logger.error(
                f"Internal error on {request.method} {request.path}: "
                f"{type(exc).__name__} context={dict(exc.context or {})}"
            )
        else:
            logger.warning(
                f"Handled {exc.code} ({type(exc).__name__}) on {request.method} {request.path}"
            )
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        creator_id = getattr(g, "creator_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {client_ip()}, creator={creator_id}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        return handle_app_error(AppError(kind=ErrorKind.INTERNAL_ERROR))
