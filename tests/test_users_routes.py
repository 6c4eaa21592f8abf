from __future__ import annotations


def test_admin_creates_user(client, admin_headers) -> None:
    payload = {
        "username": "u-new",
        "password": "password-new",
        "firstName": "First",
        "lastName": "Last",
        "email": "new@example.com",
        "isAdmin": True,
    }
    r = client.post("/users", json=payload, headers=admin_headers)
    assert r.status_code == 201
    body = r.json()
    assert body["user"] == {
        "username": "u-new",
        "firstName": "First",
        "lastName": "Last",
        "email": "new@example.com",
        "isAdmin": True,
    }
    assert isinstance(body["token"], str)


def test_create_user_requires_admin(client, u1_headers) -> None:
    payload = {
        "username": "u-new",
        "password": "password-new",
        "firstName": "First",
        "lastName": "Last",
        "email": "new@example.com",
    }
    assert client.post("/users", json=payload, headers=u1_headers).status_code == 401


def test_list_users_requires_admin(client, admin_headers, u1_headers) -> None:
    r = client.get("/users", headers=admin_headers)
    assert r.status_code == 200
    assert [u["username"] for u in r.json()["users"]] == ["admin", "u1", "u2"]

    assert client.get("/users", headers=u1_headers).status_code == 401
    assert client.get("/users").status_code == 401


def test_get_self(client, u1_headers) -> None:
    r = client.get("/users/u1", headers=u1_headers)
    assert r.status_code == 200
    assert r.json() == {
        "user": {
            "username": "u1",
            "firstName": "Fu1",
            "lastName": "Lu1",
            "email": "u1@example.com",
            "isAdmin": False,
            "jobs": [],
        }
    }


def test_get_other_user_is_unauthorized(client, u1_headers) -> None:
    r = client.get("/users/u2", headers=u1_headers)
    assert r.status_code == 401
    assert r.json()["detail"] == "Must be the user or an admin"


def test_admin_gets_any_user(client, admin_headers) -> None:
    assert client.get("/users/u2", headers=admin_headers).status_code == 200
    assert client.get("/users/nope", headers=admin_headers).status_code == 404


def test_invalid_token_behaves_like_no_token(client) -> None:
    anon = client.get("/users/u1")
    bad = client.get("/users/u1", headers={"Authorization": "Bearer garbage"})
    assert anon.status_code == bad.status_code == 401
    assert anon.json() == bad.json()


def test_update_self(client, u1_headers) -> None:
    r = client.patch("/users/u1", json={"firstName": "New", "email": "new@example.com"}, headers=u1_headers)
    assert r.status_code == 200
    user = r.json()["user"]
    assert user["firstName"] == "New"
    assert user["email"] == "new@example.com"
    assert user["lastName"] == "Lu1"


def test_update_password_is_hashed(client, u1_headers) -> None:
    r = client.patch("/users/u1", json={"password": "brand-new-pass"}, headers=u1_headers)
    assert r.status_code == 200
    assert "password" not in r.json()["user"]

    login = client.post("/auth/token", json={"username": "u1", "password": "brand-new-pass"})
    assert login.status_code == 200


def test_update_cannot_grant_admin(client, u1_headers) -> None:
    r = client.patch("/users/u1", json={"isAdmin": True}, headers=u1_headers)
    assert r.status_code == 400


def test_update_empty_payload(client, u1_headers) -> None:
    r = client.patch("/users/u1", json={}, headers=u1_headers)
    assert r.status_code == 400


def test_update_other_user_is_unauthorized(client, u1_headers) -> None:
    assert client.patch("/users/u2", json={"firstName": "X"}, headers=u1_headers).status_code == 401


def test_delete_self(client, u1_headers, admin_headers) -> None:
    r = client.delete("/users/u1", headers=u1_headers)
    assert r.status_code == 200
    assert r.json() == {"deleted": "u1"}
    assert client.get("/users/u1", headers=admin_headers).status_code == 404


def test_delete_other_user_is_unauthorized(client, u1_headers) -> None:
    assert client.delete("/users/u2", headers=u1_headers).status_code == 401


def test_apply_to_job(client, u1_headers, job_ids) -> None:
    job_id = job_ids["Job 3"]
    r = client.post(f"/users/u1/jobs/{job_id}", headers=u1_headers)
    assert r.status_code == 200
    assert r.json() == {"applied": job_id}

    user = client.get("/users/u1", headers=u1_headers).json()["user"]
    assert user["jobs"] == [job_id]

    assert client.post(f"/users/u1/jobs/{job_id}", headers=u1_headers).status_code == 400


def test_apply_to_missing_job(client, u1_headers) -> None:
    assert client.post("/users/u1/jobs/999999", headers=u1_headers).status_code == 404


def test_apply_for_other_user_is_unauthorized(client, u1_headers, job_ids) -> None:
    assert client.post(f"/users/u2/jobs/{job_ids['Job 3']}", headers=u1_headers).status_code == 401


def test_admin_cannot_change_admin_flag_through_update(client, admin_headers) -> None:
    r = client.patch("/users/u1", json={"isAdmin": True}, headers=admin_headers)
    assert r.status_code == 400

    user = client.get("/users/u1", headers=admin_headers).json()["user"]
    assert user["isAdmin"] is False
