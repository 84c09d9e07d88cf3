from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from creatorhub.application.services.session_store import SessionStore, parse_token
from creatorhub.domain.creators.exceptions import CreatorNotFoundError, InvalidTokenError


@pytest.fixture()
def creator(credential_store):
    return credential_store.create("alice", "alice@example.com", "secret123")


def test_parse_token_accepts_canonical_and_uuid() -> None:
    token = uuid4()

    assert parse_token(str(token)) == token
    assert parse_token(f"  {token}  ") == token
    assert parse_token(token) is token


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", "g" * 32])
def test_parse_token_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidTokenError):
        parse_token(raw)


def test_create_issues_distinct_tokens(session_store: SessionStore, creator) -> None:
    tokens = {session_store.create(creator.id).token for _ in range(5)}

    assert len(tokens) == 5
    assert all(isinstance(token, UUID) for token in tokens)


def test_create_uses_token_factory(sessions, creator) -> None:
    fixed = UUID("00000000-0000-4000-8000-000000000001")
    store = SessionStore(sessions=sessions, token_factory=lambda: fixed)

    assert store.create(creator.id).token == fixed
    assert store.get_by_token(str(fixed)).subject == creator.id


def test_create_for_unknown_subject(session_store: SessionStore) -> None:
    with pytest.raises(CreatorNotFoundError):
        session_store.create(uuid4())


def test_get_by_token_unknown(session_store: SessionStore) -> None:
    with pytest.raises(InvalidTokenError):
        session_store.get_by_token(uuid4())


def test_get_by_subject_orders_oldest_first(session_store: SessionStore, creator) -> None:
    created = [session_store.create(creator.id) for _ in range(3)]

    assert session_store.get_by_subject(creator.id) == created
    assert session_store.get_by_subject(uuid4()) == []


def test_remove_by_token_is_idempotent(session_store: SessionStore, creator) -> None:
    session = session_store.create(creator.id)

    session_store.remove_by_token(session.token)
    session_store.remove_by_token(session.token)

    with pytest.raises(InvalidTokenError):
        session_store.get_by_token(session.token)


def test_remove_by_subject_leaves_other_creators(
    session_store: SessionStore, credential_store, creator
) -> None:
    bob = credential_store.create("bob", "bob@example.com", "secret123")
    session_store.create(creator.id)
    session_store.create(creator.id)
    kept = session_store.create(bob.id)

    session_store.remove_by_subject(creator.id)

    assert session_store.get_by_subject(creator.id) == []
    assert session_store.get_by_subject(bob.id) == [kept]
