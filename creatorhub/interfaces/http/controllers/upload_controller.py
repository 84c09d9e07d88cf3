# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from creatorhub.application.services.authenticator import RequestAuthenticator
from creatorhub.application.use_cases.creators import UploadPictureUseCase
from creatorhub.infrastructure.audit import AuditAction, audit_log
from creatorhub.interfaces.http.auth import authenticate_request
from creatorhub.interfaces.http.dto.creator import PictureRefDTO
from creatorhub.shared.errors import BadRequestError
from creatorhub.shared.middleware.request_logger import client_ip


class UploadController:
    """Profile picture upload. Accepts a multipart ``file`` part or a raw body."""

    def __init__(
        self,
        *,
        authenticator: RequestAuthenticator,
        upload_picture: UploadPictureUseCase,
    ) -> None:
        self._authenticator = authenticator
        self._upload_picture = upload_picture

    def upload_picture(self) -> tuple[Response, int]:
        session = authenticate_request(self._authenticator)

        upload = request.files.get("file")
        body = upload.read() if upload is not None else request.get_data()
        if not body:
            raise BadRequestError(context={"reason": "empty upload"})

        key = self._upload_picture.execute(session.subject, body)
        audit_log(
            AuditAction.PICTURE_UPLOADED,
            creator_id=session.subject,
            ip_address=client_ip(),
            details={"size": len(body)},
        )
        return jsonify(PictureRefDTO(picture_ref=key).model_dump(by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("upload", __name__, url_prefix="/api/creator")
        bp.add_url_rule("/pfp", view_func=self.upload_picture, methods=["POST"])
        return bp
