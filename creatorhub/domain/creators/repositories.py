# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import BinaryIO, Protocol
from uuid import UUID

from .entities import Creator, CreatorChanges, Session


class CreatorRepository(Protocol):
    def add(self, name: str, email: str, password_hash: str) -> Creator: ...
    def find_by_id(self, creator_id: UUID) -> Creator | None: ...
    def find_by_name(self, name: str) -> Creator | None: ...
    def find_by_email(self, email: str) -> Creator | None: ...
    def update(self, creator_id: UUID, changes: CreatorChanges) -> Creator | None: ...
    def delete(self, creator_id: UUID) -> bool: ...


class SessionRepository(Protocol):
    def add(self, token: UUID, subject: UUID) -> Session: ...
    def find_by_token(self, token: UUID) -> Session | None: ...
    def list_for_subject(self, subject: UUID) -> list[Session]: ...
    def delete_by_token(self, token: UUID) -> int: ...
    def delete_by_subject(self, subject: UUID) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TransactionManager(Protocol):
    def transaction(self) -> AbstractContextManager[object]: ...


class ObjectStorage(Protocol):
    def put(self, key: str, body: bytes | BinaryIO, *, purpose: str) -> str: ...
