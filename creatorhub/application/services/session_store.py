# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID, uuid4

from creatorhub.domain.creators.entities import Session
from creatorhub.domain.creators.exceptions import InvalidTokenError
from creatorhub.domain.creators.repositories import SessionRepository
from creatorhub.shared.logging import logger


def parse_token(raw: str | UUID) -> UUID:
    """Parse a presented token; anything malformed is an auth failure."""

    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw.strip())
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidTokenError(context={"reason": "malformed"}) from exc


class SessionStore:
    def __init__(
        self,
        *,
        sessions: SessionRepository,
        token_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._sessions = sessions
        self._token_factory = token_factory

    def create(self, subject_id: UUID) -> Session:
        session = self._sessions.add(self._token_factory(), subject_id)
        logger.info(f"sessions.create: ok creator_id={subject_id}")
        return session

    def get_by_token(self, token: str | UUID) -> Session:
        session = self._sessions.find_by_token(parse_token(token))
        if session is None:
            raise InvalidTokenError(context={"reason": "unknown"})
        return session

    def get_by_subject(self, subject_id: UUID) -> list[Session]:
        return self._sessions.list_for_subject(subject_id)

    def remove_by_token(self, token: str | UUID) -> None:
        removed = self._sessions.delete_by_token(parse_token(token))
        logger.info(f"sessions.remove_by_token: removed={removed}")

    def remove_by_subject(self, subject_id: UUID) -> None:
        removed = self._sessions.delete_by_subject(subject_id)
        logger.info(f"sessions.remove_by_subject: creator_id={subject_id} removed={removed}")
