# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.application.services.session_store import SessionStore
from creatorhub.domain.creators.entities import Creator, Session
from creatorhub.shared.errors.base import BadRequestError


class SignInUseCase:
    def __init__(self, *, credentials: CredentialStore, sessions: SessionStore) -> None:
        self._credentials = credentials
        self._sessions = sessions

    def execute(
        self,
        password: str,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> tuple[Creator, Session]:
        if name is not None:
            creator = self._credentials.get_by_name(name)
        elif email is not None:
            creator = self._credentials.get_by_email(email)
        else:
            raise BadRequestError(context={"reason": "name or email required"})

        self._credentials.verify(creator, password)
        return creator, self._sessions.create(creator.id)
