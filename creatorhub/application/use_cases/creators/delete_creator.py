# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uuid import UUID

from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.application.services.session_store import SessionStore
from creatorhub.domain.creators.repositories import TransactionManager


class DeleteCreatorUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        sessions: SessionStore,
        transactions: TransactionManager,
    ) -> None:
        self._credentials = credentials
        self._sessions = sessions
        self._transactions = transactions

    def execute(self, creator_id: UUID, password: str) -> None:
        creator = self._credentials.get_by_id(creator_id)
        self._credentials.verify(creator, password)

        with self._transactions.transaction():
            self._sessions.remove_by_subject(creator_id)
            self._credentials.delete_by_id(creator_id)
