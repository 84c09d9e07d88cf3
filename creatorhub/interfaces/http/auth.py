# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import g, request

from creatorhub.application.services.authenticator import RequestAuthenticator
from creatorhub.domain.creators.entities import Session
from creatorhub.shared.errors import UnauthorizedError
from creatorhub.shared.logging import logger


def authenticate_request(authenticator: RequestAuthenticator) -> Session:
    """Resolve the current request's bearer token or raise ``UnauthorizedError``.

    Protected handlers call this first and use ``session.subject`` as the only
    identity for ownership decisions.
    """

    try:
        session = authenticator.authenticate(request.headers)
    except UnauthorizedError as exc:
        logger.warning(f"Auth failed ({type(exc).__name__}) on {request.method} {request.path}")
        raise
    g.creator_id = session.subject
    logger.debug(f"Auth OK: creator={session.subject} {request.method} {request.path}")
    return session
