from __future__ import annotations

from uuid import UUID

from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.application.services.session_store import SessionStore
from creatorhub.domain.creators.entities import Creator, Session


class GetProfileUseCase:
    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self, creator_id: UUID) -> Creator:
        return self._credentials.get_by_id(creator_id)


class ListSessionsUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, creator_id: UUID) -> list[Session]:
        return self._sessions.get_by_subject(creator_id)
