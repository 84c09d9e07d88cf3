# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from creatorhub.domain.creators.exceptions import StoreUnavailableError
from creatorhub.infrastructure.db import Database
from creatorhub.infrastructure.health import check_database


class MiscController:
    def __init__(self, *, database: Database, api_version: str) -> None:
        self._database = database
        self._api_version = api_version

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/version", view_func=self.version, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def version(self):
        return jsonify({"version": self._api_version})

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._database)
            status["database"] = "ok"
        except StoreUnavailableError:
            status["ok"] = False
            status["database"] = "unavailable"
            return jsonify(status), 503
        return jsonify(status)
