from __future__ import annotations

import io

from flask.testing import FlaskClient

from creatorhub.app import create_app
from creatorhub.application.use_cases.creators import profile_picture_key
from creatorhub.infrastructure.container import Container
from creatorhub.infrastructure.db import Creator, CreatorSession


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _signup(client: FlaskClient, name: str = "alice", email: str = "a@x.com") -> str:
    response = client.post(
        "/api/creator/signup",
        json={"name": name, "email": email, "password": "correct-horse"},
    )
    assert response.status_code == 200
    return response.get_json()["token"]


def test_signup_login_update_flow(client: FlaskClient) -> None:
    t1 = _signup(client)

    login = client.post("/api/creator/login", json={"name": "alice", "password": "correct-horse"})
    assert login.status_code == 200
    t2 = login.get_json()["token"]
    assert t2 != t1

    wrong = client.post("/api/creator/login", json={"name": "alice", "password": "wrong"})
    assert wrong.status_code == 401
    assert wrong.get_json() == {"error": "UNAUTHORIZED"}

    update = client.post(
        "/api/creator/update",
        headers=_bearer(t1),
        json={"currentPassword": "correct-horse", "newPassword": "new-pass"},
    )
    assert update.status_code == 200

    old = client.post("/api/creator/login", json={"name": "alice", "password": "correct-horse"})
    assert old.status_code == 401
    new = client.post("/api/creator/login", json={"name": "alice", "password": "new-pass"})
    assert new.status_code == 200


def test_duplicate_signup_conflicts(client: FlaskClient) -> None:
    _signup(client)

    same_name = client.post(
        "/api/creator/signup",
        json={"name": "alice", "email": "other@x.com", "password": "correct-horse"},
    )
    same_email = client.post(
        "/api/creator/signup",
        json={"name": "bob", "email": "a@x.com", "password": "correct-horse"},
    )

    assert same_name.status_code == 409
    assert same_email.status_code == 409
    assert same_name.get_json() == {"error": "ALREADY_EXISTS"}


def test_login_by_email_and_unknown_name(client: FlaskClient) -> None:
    _signup(client)

    by_email = client.post("/api/creator/login", json={"email": "a@x.com", "password": "correct-horse"})
    unknown = client.post("/api/creator/login", json={"name": "nobody", "password": "correct-horse"})

    assert by_email.status_code == 200
    assert unknown.status_code == 404


def test_logout_revokes_only_that_token(client: FlaskClient) -> None:
    t1 = _signup(client)
    t2 = client.post(
        "/api/creator/login", json={"name": "alice", "password": "correct-horse"}
    ).get_json()["token"]

    assert client.post("/api/creator/logout", headers=_bearer(t1)).status_code == 204

    assert client.get("/api/creator/me", headers=_bearer(t1)).status_code == 401
    assert client.get("/api/creator/me", headers=_bearer(t2)).status_code == 200


def test_me_and_sessions(client: FlaskClient) -> None:
    t1 = _signup(client)
    client.post("/api/creator/login", json={"name": "alice", "password": "correct-horse"})

    me = client.get("/api/creator/me", headers={"Authorization": t1})
    sessions = client.get("/api/creator/sessions", headers=_bearer(t1))

    assert me.status_code == 200
    assert me.get_json()["email"] == "a@x.com"
    listed = sessions.get_json()["sessions"]
    assert len(listed) == 2
    assert sum(item["current"] for item in listed) == 1


def test_missing_and_malformed_tokens(client: FlaskClient) -> None:
    assert client.get("/api/creator/me").status_code == 401
    assert client.get("/api/creator/me", headers=_bearer("garbage")).status_code == 401
    assert (
        client.get(
            "/api/creator/me", headers=_bearer("00000000-0000-4000-8000-000000000000")
        ).status_code
        == 401
    )


def test_update_wrong_password_changes_nothing(client: FlaskClient) -> None:
    token = _signup(client)

    response = client.post(
        "/api/creator/update",
        headers=_bearer(token),
        json={"currentPassword": "wrong", "email": "new@x.com"},
    )

    assert response.status_code == 401
    assert client.get("/api/creator/me", headers=_bearer(token)).get_json()["email"] == "a@x.com"


def test_update_email_taken(client: FlaskClient) -> None:
    _signup(client, name="bob", email="b@x.com")
    token = _signup(client)

    response = client.post(
        "/api/creator/update",
        headers=_bearer(token),
        json={"currentPassword": "correct-horse", "email": "b@x.com"},
    )

    assert response.status_code == 409


def test_update_with_picture_and_upload(client: FlaskClient, storage) -> None:
    token = _signup(client)
    me = client.get("/api/creator/me", headers=_bearer(token)).get_json()
    key = f"pfp-{me['id']}"

    update = client.post(
        "/api/creator/update",
        headers=_bearer(token),
        data={
            "data": '{"currentPassword": "correct-horse"}',
            "file": (io.BytesIO(b"\x89PNG"), "me.png"),
        },
        content_type="multipart/form-data",
    )
    upload = client.post(
        "/api/creator/pfp",
        headers=_bearer(token),
        data={"file": (io.BytesIO(b"second"), "me.png")},
        content_type="multipart/form-data",
    )

    assert update.status_code == 200
    assert update.get_json()["pictureRef"] == key
    assert upload.get_json() == {"pictureRef": key}
    assert storage.objects[key] == (b"second", "pfp")


def test_delete_account_cleans_up(client: FlaskClient, container: Container) -> None:
    t1 = _signup(client)
    t2 = client.post(
        "/api/creator/login", json={"name": "alice", "password": "correct-horse"}
    ).get_json()["token"]

    wrong = client.delete("/api/creator/delete", headers=_bearer(t1), json={"password": "nope"})
    assert wrong.status_code == 401

    deleted = client.delete(
        "/api/creator/delete", headers=_bearer(t1), json={"password": "correct-horse"}
    )
    assert deleted.status_code == 204

    assert client.get("/api/creator/me", headers=_bearer(t2)).status_code == 401
    with container.database.session_scope() as session:
        assert session.query(Creator).count() == 0
        assert session.query(CreatorSession).count() == 0

    assert _signup(client) != t1


def test_delete_disabled(config_factory, storage) -> None:
    container = Container(config_factory(ACCOUNT_DELETION_ENABLED=False), storage=storage)
    try:
        client = create_app(container=container).test_client()
        token = _signup(client)

        response = client.delete(
            "/api/creator/delete", headers=_bearer(token), json={"password": "correct-horse"}
        )

        assert response.status_code in (404, 405)
    finally:
        container.close()


def test_version_health_and_headers(client: FlaskClient) -> None:
    version = client.get("/api/version")
    health = client.get("/api/health")

    assert version.get_json() == {"version": "v1"}
    assert health.get_json() == {"ok": True, "database": "ok"}
    assert version.headers["X-Content-Type-Options"] == "nosniff"
    assert version.headers["X-Request-ID"]


def test_picture_key_matches_upload_key(client: FlaskClient) -> None:
    token = _signup(client)
    me = client.get("/api/creator/me", headers=_bearer(token)).get_json()

    response = client.post("/api/creator/pfp", headers=_bearer(token), data=b"raw")

    assert response.get_json()["pictureRef"] == profile_picture_key(me["id"])
