"""Use-case for revoking the presented session token."""

from __future__ import annotations

from creatorhub.application.services.session_store import SessionStore
from creatorhub.domain.creators.entities import Session


class SignOutUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, session: Session) -> None:
        self._sessions.remove_by_token(session.token)
