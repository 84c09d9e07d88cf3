# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.application.services.session_store import SessionStore
from creatorhub.domain.creators.entities import Creator, Session
from creatorhub.domain.creators.repositories import TransactionManager


class SignUpUseCase:
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

    def execute(self, name: str, email: str, password: str) -> tuple[Creator, Session]:
        with self._transactions.transaction():
            creator = self._credentials.create(name, email, password)
            session = self._sessions.create(creator.id)
        return creator, session
