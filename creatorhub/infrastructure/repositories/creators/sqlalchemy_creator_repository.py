# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from creatorhub.domain.creators.entities import Creator as DomainCreator
from creatorhub.domain.creators.entities import CreatorChanges
from creatorhub.domain.creators.entities import Session as DomainSession
from creatorhub.domain.creators.exceptions import (
    CreatorAlreadyExistsError,
    CreatorNotFoundError,
    StoreUnavailableError,
)
from creatorhub.domain.creators.repositories import CreatorRepository, SessionRepository
from creatorhub.infrastructure.db.models import Creator, CreatorSession
from creatorhub.infrastructure.db.session import Database
from creatorhub.shared.errors.base import AppError
from creatorhub.shared.logging import logger


@contextmanager
def _store_errors(
    operation: str, *, on_conflict: type[AppError] | None = None
) -> Iterator[None]:
    try:
        yield
    except AppError:
        raise
    except IntegrityError as exc:
        if on_conflict is None:
            logger.error(f"repository.{operation}: integrity violation")
            raise StoreUnavailableError(context={"operation": operation}) from exc
        logger.info(f"repository.{operation}: constraint violation")
        raise on_conflict(context={"operation": operation}) from exc
    except SQLAlchemyError as exc:
        logger.error(f"repository.{operation}: {type(exc).__name__}")
        raise StoreUnavailableError(context={"operation": operation}) from exc


def _utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _creator_from_row(row: Creator) -> DomainCreator:
    return DomainCreator(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        picture_ref=row.picture_ref,
        created_at=_utc(row.created_at),
    )


def _session_from_row(row: CreatorSession) -> DomainSession:
    return DomainSession(
        token=row.token,
        subject=row.subject,
        created_at=_utc(row.created_at),
    )


class SqlAlchemyCreatorRepository(CreatorRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def add(self, name: str, email: str, password_hash: str) -> DomainCreator:
        with _store_errors("creators.add", on_conflict=CreatorAlreadyExistsError):
            with self._db.session_scope() as session:
                row = Creator(name=name, email=email, password_hash=password_hash)
                session.add(row)
                session.flush()
                return _creator_from_row(row)

    def find_by_id(self, creator_id: UUID) -> DomainCreator | None:
        with _store_errors("creators.find_by_id"):
            with self._db.session_scope() as session:
                row = session.get(Creator, creator_id)
                return _creator_from_row(row) if row else None

    def find_by_name(self, name: str) -> DomainCreator | None:
        with _store_errors("creators.find_by_name"):
            with self._db.session_scope() as session:
                row = session.query(Creator).filter(Creator.name == name).first()
                return _creator_from_row(row) if row else None

    def find_by_email(self, email: str) -> DomainCreator | None:
        with _store_errors("creators.find_by_email"):
            with self._db.session_scope() as session:
                row = session.query(Creator).filter(Creator.email == email).first()
                return _creator_from_row(row) if row else None

    def update(self, creator_id: UUID, changes: CreatorChanges) -> DomainCreator | None:
        with _store_errors("creators.update", on_conflict=CreatorAlreadyExistsError):
            with self._db.session_scope() as session:
                row = session.get(Creator, creator_id)
                if row is None:
                    return None
                if changes.email is not None:
                    row.email = changes.email
                if changes.password_hash is not None:
                    row.password_hash = changes.password_hash
                if changes.picture_ref is not None:
                    row.picture_ref = changes.picture_ref
                session.flush()
                return _creator_from_row(row)

    def delete(self, creator_id: UUID) -> bool:
        with _store_errors("creators.delete"):
            with self._db.session_scope() as session:
                deleted = (
                    session.query(Creator)
                    .filter(Creator.id == creator_id)
                    .delete(synchronize_session=False)
                )
                return deleted > 0


class SqlAlchemySessionRepository(SessionRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def add(self, token: UUID, subject: UUID) -> DomainSession:
        # the only constraint a fresh random token can break is the subject FK
        with _store_errors("sessions.add", on_conflict=CreatorNotFoundError):
            with self._db.session_scope() as session:
                row = CreatorSession(token=token, subject=subject)
                session.add(row)
                session.flush()
                return _session_from_row(row)

    def find_by_token(self, token: UUID) -> DomainSession | None:
        with _store_errors("sessions.find_by_token"):
            with self._db.session_scope() as session:
                row = session.get(CreatorSession, token)
                return _session_from_row(row) if row else None

    def list_for_subject(self, subject: UUID) -> list[DomainSession]:
        with _store_errors("sessions.list_for_subject"):
            with self._db.session_scope() as session:
                rows = (
                    session.query(CreatorSession)
                    .filter(CreatorSession.subject == subject)
                    .order_by(CreatorSession.created_at.asc(), CreatorSession.token.asc())
                    .all()
                )
                return [_session_from_row(row) for row in rows]

    def delete_by_token(self, token: UUID) -> int:
        with _store_errors("sessions.delete_by_token"):
            with self._db.session_scope() as session:
                return (
                    session.query(CreatorSession)
                    .filter(CreatorSession.token == token)
                    .delete(synchronize_session=False)
                )

    def delete_by_subject(self, subject: UUID) -> int:
        with _store_errors("sessions.delete_by_subject"):
            with self._db.session_scope() as session:
                return (
                    session.query(CreatorSession)
                    .filter(CreatorSession.subject == subject)
                    .delete(synchronize_session=False)
                )
