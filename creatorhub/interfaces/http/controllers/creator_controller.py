# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from creatorhub.application.services.authenticator import RequestAuthenticator
from creatorhub.application.use_cases.creators import (
    DeleteCreatorUseCase,
    GetProfileUseCase,
    ListSessionsUseCase,
    SignInUseCase,
    SignOutUseCase,
    SignUpUseCase,
    UpdateCreatorInput,
    UpdateCreatorUseCase,
)
from creatorhub.infrastructure.audit import AuditAction, audit_log
from creatorhub.interfaces.http.auth import authenticate_request
from creatorhub.interfaces.http.dto.creator import (
    CreatorDTO,
    DeleteCreatorRequestDTO,
    SessionDTO,
    SessionListDTO,
    SignInRequestDTO,
    SignUpRequestDTO,
    TokenDTO,
    UpdateCreatorRequestDTO,
)
from creatorhub.shared.errors import AppError, BadRequestError
from creatorhub.shared.errors.validation import raise_validation_error
from creatorhub.shared.logging import logger
from creatorhub.shared.middleware.request_logger import client_ip


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequestError(context={"reason": "JSON object body required"})
    return payload


def _update_request() -> tuple[dict, bytes | None]:
    """Read an update either as plain JSON or as multipart ``data`` + ``file``."""
    if not request.mimetype.startswith("multipart/"):
        return _json_body(), None

    raw = request.form.get("data")
    if raw is None:
        raise BadRequestError(context={"reason": "multipart 'data' part required"})
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise BadRequestError(context={"reason": "'data' part is not valid JSON"}) from exc
    if not isinstance(payload, dict):
        raise BadRequestError(context={"reason": "'data' part must be a JSON object"})

    upload = request.files.get("file")
    if upload is None:
        return payload, None
    body = upload.read()
    if not body:
        raise BadRequestError(context={"reason": "empty file"})
    return payload, body


class CreatorController:
    def __init__(
        self,
        *,
        authenticator: RequestAuthenticator,
        sign_up: SignUpUseCase,
        sign_in: SignInUseCase,
        sign_out: SignOutUseCase,
        get_profile: GetProfileUseCase,
        list_sessions: ListSessionsUseCase,
        update_creator: UpdateCreatorUseCase,
        delete_creator: DeleteCreatorUseCase,
        deletion_enabled: bool = True,
    ) -> None:
        self._authenticator = authenticator
        self._sign_up = sign_up
        self._sign_in = sign_in
        self._sign_out = sign_out
        self._get_profile = get_profile
        self._list_sessions = list_sessions
        self._update_creator = update_creator
        self._delete_creator = delete_creator
        self._deletion_enabled = deletion_enabled

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignUpRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        creator, session = self._sign_up.execute(dto.name, dto.email, dto.password)

        audit_log(
            AuditAction.SIGN_UP,
            creator_id=creator.id,
            ip_address=client_ip(),
            details={"name": creator.name},
        )
        logger.info(f"creator.signup: ok creator_id={creator.id}")
        return jsonify(TokenDTO(token=session.token).model_dump(mode="json")), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = SignInRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip()
        try:
            creator, session = self._sign_in.execute(
                dto.password, name=dto.name, email=dto.email
            )
        except AppError as exc:
            audit_log(
                AuditAction.SIGN_IN_FAILED,
                ip_address=ip_address,
                details={"name": dto.name, "error": exc.code},
                success=False,
            )
            raise

        audit_log(AuditAction.SIGN_IN_SUCCESS, creator_id=creator.id, ip_address=ip_address)
        logger.info(f"creator.login: ok creator_id={creator.id}")
        return jsonify(TokenDTO(token=session.token).model_dump(mode="json")), 200

    def logout(self) -> tuple[str, int]:
        session = authenticate_request(self._authenticator)
        self._sign_out.execute(session)
        audit_log(AuditAction.SIGN_OUT, creator_id=session.subject, ip_address=client_ip())
        return "", 204

    def me(self) -> tuple[Response, int]:
        session = authenticate_request(self._authenticator)
        creator = self._get_profile.execute(session.subject)
        return jsonify(CreatorDTO.from_entity(creator).model_dump(mode="json", by_alias=True)), 200

    def sessions(self) -> tuple[Response, int]:
        session = authenticate_request(self._authenticator)
        items = [
            SessionDTO.from_entity(item, current_token=session.token)
            for item in self._list_sessions.execute(session.subject)
        ]
        payload = SessionListDTO(sessions=items).model_dump(mode="json", by_alias=True)
        return jsonify(payload), 200

    def update(self) -> tuple[Response, int]:
        session = authenticate_request(self._authenticator)
        payload, picture = _update_request()
        try:
            dto = UpdateCreatorRequestDTO.model_validate(payload)
        except ValidationError as exc:
            raise_validation_error(exc)

        creator = self._update_creator.execute(
            session.subject,
            UpdateCreatorInput(
                current_password=dto.current_password,
                email=dto.email,
                new_password=dto.new_password,
                picture_ref=dto.picture_ref,
                picture=picture,
            ),
        )

        audit_log(
            AuditAction.CREATOR_UPDATED,
            creator_id=creator.id,
            ip_address=client_ip(),
            details={
                "email_changed": dto.email is not None,
                "password_changed": dto.new_password is not None,
                "picture_changed": picture is not None or dto.picture_ref is not None,
            },
        )
        return jsonify(CreatorDTO.from_entity(creator).model_dump(mode="json", by_alias=True)), 200

    def delete(self) -> tuple[str, int]:
        session = authenticate_request(self._authenticator)
        try:
            dto = DeleteCreatorRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        self._delete_creator.execute(session.subject, dto.password)
        audit_log(AuditAction.CREATOR_DELETED, creator_id=session.subject, ip_address=client_ip())
        return "", 204

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("creator", __name__, url_prefix="/api/creator")
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        bp.add_url_rule("/sessions", view_func=self.sessions, methods=["GET"])
        bp.add_url_rule("/update", view_func=self.update, methods=["POST"])
        if self._deletion_enabled:
            bp.add_url_rule("/delete", view_func=self.delete, methods=["DELETE"])
        return bp
