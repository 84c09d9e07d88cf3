from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from typing import BinaryIO
from uuid import UUID, uuid4

import pytest
from flask import Flask
from flask.testing import FlaskClient

from creatorhub.app import create_app
from creatorhub.application.services.credential_store import CredentialStore
from creatorhub.application.services.session_store import SessionStore
from creatorhub.domain.creators.entities import Creator, CreatorChanges, Session
from creatorhub.domain.creators.exceptions import (
    CreatorAlreadyExistsError,
    CreatorNotFoundError,
)
from creatorhub.domain.creators.repositories import (
    CreatorRepository,
    ObjectStorage,
    PasswordHasher,
    SessionRepository,
)
from creatorhub.infrastructure.container import Container
from creatorhub.shared.config import (
    AppConfig,
    DatabaseConfig,
    HashingConfig,
    SecurityConfig,
    StorageConfig,
)


class InMemoryCreatorRepository(CreatorRepository):
    def __init__(self) -> None:
        self._creators: dict[UUID, Creator] = {}

    def add(self, name: str, email: str, password_hash: str) -> Creator:
        if any(c.name == name or c.email == email for c in self._creators.values()):
            raise CreatorAlreadyExistsError()
        creator = Creator(
            id=uuid4(),
            name=name,
            email=email,
            password_hash=password_hash,
            picture_ref=None,
            created_at=datetime.now(UTC),
        )
        self._creators[creator.id] = creator
        return creator

    def find_by_id(self, creator_id: UUID) -> Creator | None:
        return self._creators.get(creator_id)

    def find_by_name(self, name: str) -> Creator | None:
        return next((c for c in self._creators.values() if c.name == name), None)

    def find_by_email(self, email: str) -> Creator | None:
        return next((c for c in self._creators.values() if c.email == email), None)

    def update(self, creator_id: UUID, changes: CreatorChanges) -> Creator | None:
        current = self._creators.get(creator_id)
        if current is None:
            return None
        if changes.email is not None and any(
            c.email == changes.email and c.id != creator_id for c in self._creators.values()
        ):
            raise CreatorAlreadyExistsError()
        updated = replace(
            current,
            email=changes.email if changes.email is not None else current.email,
            password_hash=(
                changes.password_hash
                if changes.password_hash is not None
                else current.password_hash
            ),
            picture_ref=(
                changes.picture_ref if changes.picture_ref is not None else current.picture_ref
            ),
        )
        self._creators[creator_id] = updated
        return updated

    def delete(self, creator_id: UUID) -> bool:
        return self._creators.pop(creator_id, None) is not None


class InMemorySessionRepository(SessionRepository):
    def __init__(self, creators: InMemoryCreatorRepository) -> None:
        self._creators = creators
        self._sessions: dict[UUID, Session] = {}
        self._clock = datetime(2025, 1, 1, tzinfo=UTC)

    def add(self, token: UUID, subject: UUID) -> Session:
        if self._creators.find_by_id(subject) is None:
            raise CreatorNotFoundError()
        self._clock += timedelta(seconds=1)
        session = Session(token=token, subject=subject, created_at=self._clock)
        self._sessions[token] = session
        return session

    def find_by_token(self, token: UUID) -> Session | None:
        return self._sessions.get(token)

    def list_for_subject(self, subject: UUID) -> list[Session]:
        return sorted(
            (s for s in self._sessions.values() if s.subject == subject),
            key=lambda s: (s.created_at, s.token),
        )

    def delete_by_token(self, token: UUID) -> int:
        return 1 if self._sessions.pop(token, None) is not None else 0

    def delete_by_subject(self, subject: UUID) -> int:
        doomed = [t for t, s in self._sessions.items() if s.subject == subject]
        for token in doomed:
            del self._sessions[token]
        return len(doomed)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class NullTransactions:
    def __init__(self) -> None:
        self.opened = 0

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self.opened += 1
        yield None


class InMemoryStorage(ObjectStorage):
    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    def put(self, key: str, body: bytes | BinaryIO, *, purpose: str) -> str:
        data = body if isinstance(body, bytes) else body.read()
        self.objects[key] = (data, purpose)
        return key


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "app.log"))


@pytest.fixture()
def creators() -> InMemoryCreatorRepository:
    return InMemoryCreatorRepository()


@pytest.fixture()
def sessions(creators: InMemoryCreatorRepository) -> InMemorySessionRepository:
    return InMemorySessionRepository(creators)


@pytest.fixture()
def credential_store(creators: InMemoryCreatorRepository) -> CredentialStore:
    return CredentialStore(creators=creators, password_hasher=DeterministicHasher())


@pytest.fixture()
def session_store(sessions: InMemorySessionRepository) -> SessionStore:
    return SessionStore(sessions=sessions)


@pytest.fixture()
def transactions() -> NullTransactions:
    return NullTransactions()


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


def make_config(**overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "APP_ENV": "test",
        "API_VERSION": "v1",
        "database": DatabaseConfig(DATABASE_URL="sqlite:///:memory:"),
        # cheapest parameters argon2 accepts
        "hashing": HashingConfig(
            ARGON2_TIME_COST=1,
            ARGON2_MEMORY_COST=8,
            ARGON2_PARALLELISM=1,
            HASHING_WORKERS=2,
        ),
        "storage": StorageConfig(STORAGE_BACKEND="local"),
        "security": SecurityConfig(ALLOWED_ORIGINS="*", ENABLE_HSTS=False),
    }
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture()
def app_config() -> AppConfig:
    return make_config()


@pytest.fixture()
def container(app_config: AppConfig, storage: InMemoryStorage) -> Iterator[Container]:
    container = Container(app_config, storage=storage)
    yield container
    container.close()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def config_factory():
    return make_config
