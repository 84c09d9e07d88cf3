# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token authentication of inbound requests."""

from __future__ import annotations

from collections.abc import Mapping
from uuid import UUID

from creatorhub.domain.creators.entities import Session
from creatorhub.domain.creators.exceptions import MissingCredentialsError

from .session_store import SessionStore, parse_token

AUTHORIZATION_HEADER = "Authorization"
_BEARER_SCHEME = "bearer"


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def extract_token(authorization: str | None) -> UUID:
    """Return the token from an ``Authorization`` value.

    Both ``Bearer <token>`` and a bare ``<token>`` are accepted. Every failure
    is reported as unauthorized so unauthenticated callers learn nothing about
    the expected format.
    """

    if authorization is None or not authorization.strip():
        raise MissingCredentialsError()

    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == _BEARER_SCHEME:
        value = rest.strip()
    if not value:
        raise MissingCredentialsError()
    return parse_token(value)


class RequestAuthenticator:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def authenticate(self, headers: Mapping[str, str]) -> Session:
        token = extract_token(_header(headers, AUTHORIZATION_HEADER))
        return self._sessions.get_by_token(token)


__all__ = ["AUTHORIZATION_HEADER", "RequestAuthenticator", "extract_token"]
