# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from creatorhub.shared.config import DatabaseConfig
from creatorhub.shared.logging import logger


class Base(DeclarativeBase):
    pass


_ACTIVE_SESSION: ContextVar[Session | None] = ContextVar("db_active_session", default=None)


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


def create_db_engine(config: DatabaseConfig) -> Engine:
    url = make_url(config.url)

    if url.get_backend_name() != "sqlite":
        return create_engine(
            url,
            echo=False,
            pool_pre_ping=True,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )

    connect_args: dict[str, object] = {
        "check_same_thread": False,
        "timeout": int(config.pool_timeout),
    }
    if url.database in (None, "", ":memory:"):
        # one shared connection, otherwise every checkout sees an empty database
        engine = create_engine(
            url, echo=False, connect_args=connect_args, poolclass=StaticPool
        )
    else:
        engine = create_engine(
            url,
            echo=False,
            pool_pre_ping=True,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
            connect_args=connect_args,
        )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


class Database:
    """Explicit handle to the relational store.

    ``session_scope`` opens a short-lived session per call. Inside
    ``transaction`` every scope on this database joins the same session,
    which is committed once when the outermost block exits.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = create_db_engine(config)
        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False
        )

    def _joined_session(self) -> Session | None:
        active = _ACTIVE_SESSION.get()
        if active is not None and active.get_bind() is self.engine:
            return active
        return None

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        joined = self._joined_session()
        if joined is not None:
            yield joined
            return

        session = self._session_factory()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except Exception as exc:
            logger.debug(f"db.session: rolling back after {type(exc).__name__}")
            session.rollback()
            raise
        finally:
            session.close()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        joined = self._joined_session()
        if joined is not None:
            yield joined
            return

        with self.session_scope() as session:
            token = _ACTIVE_SESSION.set(session)
            try:
                yield session
            finally:
                _ACTIVE_SESSION.reset(token)

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def dispose(self) -> None:
        self.engine.dispose()
