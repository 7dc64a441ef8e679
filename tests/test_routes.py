"""Tests for FastAPI endpoints (database replaced by FakeDb)."""

import asyncpg

from auth import security

UNAUTHORIZED = {"error": {"message": "Unauthorized", "status": 401}}


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestCompanies:
    def test_list_is_public(self, client, fake_db):
        fake_db.all_results.append([{"handle": "c1", "name": "C1"}])

        resp = client.get("/companies")

        assert resp.status_code == 200
        assert resp.json() == {"companies": [{"handle": "c1", "name": "C1"}]}
        assert "WHERE" not in fake_db.calls[0][0]

    def test_list_filters_and_ignores_unknown(self, client, fake_db):
        resp = client.get("/companies", params={"nameLike": "net", "color": "red"})

        assert resp.status_code == 200
        sql, args = fake_db.calls[0]
        assert "ILIKE" in sql
        assert args == ("net",)

    def test_list_inverted_range(self, client, fake_db):
        resp = client.get("/companies", params={"minEmployees": 50, "maxEmployees": 10})

        assert resp.status_code == 400
        assert resp.json()["error"]["status"] == 400
        assert fake_db.calls == []

    def test_get_with_jobs(self, client, fake_db):
        fake_db.one_results.append({"handle": "c1", "name": "C1"})
        fake_db.all_results.append([{"id": 1, "title": "J1"}])

        resp = client.get("/companies/c1")

        assert resp.status_code == 200
        assert resp.json()["company"]["jobs"] == [{"id": 1, "title": "J1"}]

    def test_get_missing(self, client):
        resp = client.get("/companies/nope")

        assert resp.status_code == 404
        assert resp.json() == {"error": {"message": "No company: nope", "status": 404}}

    def test_create_duplicate(self, client, admin_token):
        resp = client.post(
            "/companies",
            json={"handle": "c1", "name": "C1"},
            headers=_auth(admin_token),
        )

        assert resp.status_code == 400
        assert "Duplicate company" in resp.json()["error"]["message"]

    def test_patch_requires_admin(self, client, fake_db, alice_token):
        anonymous = client.patch("/companies/c1", json={"name": "New"})
        non_admin = client.patch("/companies/c1", json={"name": "New"}, headers=_auth(alice_token))
        bad_token = client.patch("/companies/c1", json={"name": "New"}, headers=_auth("x.y.z"))

        for resp in (anonymous, non_admin, bad_token):
            assert resp.status_code == 401
            assert resp.json() == UNAUTHORIZED
        assert fake_db.calls == []

    def test_patch_as_admin(self, client, fake_db, admin_token):
        fake_db.one_results.append({"handle": "c1", "name": "New"})

        resp = client.patch("/companies/c1", json={"name": "New"}, headers=_auth(admin_token))

        assert resp.status_code == 200
        assert resp.json() == {"company": {"handle": "c1", "name": "New"}}
        assert fake_db.calls[0][1] == ("New", "c1")

    def test_patch_empty_body(self, client, fake_db, admin_token):
        resp = client.patch("/companies/c1", json={}, headers=_auth(admin_token))

        assert resp.status_code == 400
        assert fake_db.calls == []

    def test_patch_missing(self, client, admin_token):
        resp = client.patch("/companies/nope", json={"name": "New"}, headers=_auth(admin_token))
        assert resp.status_code == 404

    def test_delete_as_admin(self, client, fake_db, admin_token):
        fake_db.one_results.append({"handle": "c1"})

        resp = client.delete("/companies/c1", headers=_auth(admin_token))

        assert resp.status_code == 200
        assert resp.json() == {"deleted": "c1"}


class TestJobs:
    def test_get_missing(self, client):
        assert client.get("/jobs/1").status_code == 404

    def test_create_for_missing_company(self, client, admin_token):
        resp = client.post(
            "/jobs",
            json={"title": "Dev", "salary": 100, "companyHandle": "nope"},
            headers=_auth(admin_token),
        )
        assert resp.status_code == 404

    def test_patch_rejects_company_change(self, client, admin_token):
        resp = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=_auth(admin_token))
        assert resp.status_code == 422

    def test_list_salary_range(self, client, fake_db):
        resp = client.get("/jobs", params={"minSalary": 10, "maxSalary": 5})

        assert resp.status_code == 400
        assert fake_db.calls == []


class TestUsers:
    def test_list_requires_admin(self, client, alice_token):
        resp = client.get("/users", headers=_auth(alice_token))
        assert resp.json() == UNAUTHORIZED

    def test_other_user_rejected(self, client, fake_db, alice_token):
        resp = client.get("/users/bob", headers=_auth(alice_token))

        assert resp.status_code == 401
        assert resp.json() == UNAUTHORIZED
        assert fake_db.calls == []

    def test_self_allowed(self, client, fake_db, alice_token):
        fake_db.one_results.append({"username": "alice", "isAdmin": False})
        fake_db.all_results.append([{"job_id": 4}])

        resp = client.get("/users/alice", headers=_auth(alice_token))

        assert resp.status_code == 200
        assert resp.json() == {"user": {"username": "alice", "isAdmin": False, "jobs": [4]}}

    def test_admin_creates_user_with_token(self, client, fake_db, admin_token):
        fake_db.one_results.append(
            {"username": "new", "firstName": "N", "lastName": "U", "email": "n@u.com", "isAdmin": True}
        )

        resp = client.post(
            "/users",
            json={
                "username": "new",
                "password": "password",
                "firstName": "N",
                "lastName": "U",
                "email": "n@u.com",
                "isAdmin": True,
            },
            headers=_auth(admin_token),
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["user"]["username"] == "new"
        assert security.decode_access_token(body["token"])["isAdmin"] is True
        stored_hash = fake_db.calls[0][1][1]
        assert security.verify_password("password", stored_hash)

    def test_apply_to_job(self, client, fake_db, alice_token):
        fake_db.one_results.extend([{"ok": 1}, {"username": "alice"}])

        resp = client.post("/users/alice/jobs/3", headers=_auth(alice_token))

        assert resp.status_code == 200
        assert resp.json() == {"applied": {"username": "alice", "jobId": 3}}
        assert fake_db.calls[-1][1] == ("alice", 3)


class TestAuth:
    def test_token_for_valid_credentials(self, client, fake_db):
        fake_db.one_results.append(
            {"username": "alice", "isAdmin": False, "password": security.hash_password("secret1")}
        )

        resp = client.post("/auth/token", json={"username": "alice", "password": "secret1"})

        assert resp.status_code == 200
        payload = security.decode_access_token(resp.json()["token"])
        assert payload["sub"] == "alice"
        assert payload["isAdmin"] is False

    def test_token_for_bad_password(self, client, fake_db):
        fake_db.one_results.append(
            {"username": "alice", "isAdmin": False, "password": security.hash_password("secret1")}
        )

        resp = client.post("/auth/token", json={"username": "alice", "password": "wrong"})

        assert resp.status_code == 401

    def test_register_never_creates_admin(self, client, fake_db):
        fake_db.one_results.append({"username": "eve", "isAdmin": False})

        resp = client.post(
            "/auth/register",
            json={
                "username": "eve",
                "password": "password",
                "firstName": "E",
                "lastName": "V",
                "email": "e@v.com",
                "isAdmin": True,
            },
        )

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_me_requires_login(self, client):
        resp = client.get("/auth/me")

        assert resp.status_code == 401
        assert resp.json() == UNAUTHORIZED

    def test_me(self, client, alice_token, admin_token):
        assert client.get("/auth/me", headers=_auth(alice_token)).json() == {
            "username": "alice",
            "isAdmin": False,
        }
        assert client.get("/auth/me", headers=_auth(admin_token)).json() == {
            "username": "admin",
            "isAdmin": True,
        }


class TestNullUpdates:
    def test_company_name_cannot_be_nulled(self, client, fake_db, admin_token):
        resp = client.patch("/companies/c1", json={"name": None}, headers=_auth(admin_token))

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_company_nullable_columns_can_be_cleared(self, client, fake_db, admin_token):
        fake_db.one_results.append({"handle": "c1", "description": None})

        resp = client.patch(
            "/companies/c1",
            json={"description": None, "numEmployees": None},
            headers=_auth(admin_token),
        )

        assert resp.status_code == 200
        assert fake_db.calls[0][1] == (None, None, "c1")

    def test_job_title_cannot_be_nulled(self, client, fake_db, admin_token):
        resp = client.patch("/jobs/1", json={"title": None}, headers=_auth(admin_token))

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_job_salary_can_be_cleared(self, client, fake_db, admin_token):
        fake_db.one_results.append({"id": 1, "salary": None})

        resp = client.patch("/jobs/1", json={"salary": None}, headers=_auth(admin_token))

        assert resp.status_code == 200
        assert fake_db.calls[0][1] == (None, 1)

    def test_user_password_cannot_be_nulled(self, client, fake_db, alice_token):
        resp = client.patch("/users/alice", json={"password": None}, headers=_auth(alice_token))

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_user_names_and_email_cannot_be_nulled(self, client, fake_db, alice_token):
        for field in ("firstName", "lastName", "email"):
            resp = client.patch("/users/alice", json={field: None}, headers=_auth(alice_token))
            assert resp.status_code == 422
        assert fake_db.calls == []

    def test_user_password_is_hashed_on_update(self, client, fake_db, alice_token):
        fake_db.one_results.append({"username": "alice"})

        resp = client.patch("/users/alice", json={"password": "newpass1"}, headers=_auth(alice_token))

        assert resp.status_code == 200
        stored_hash = fake_db.calls[0][1][0]
        assert stored_hash != "newpass1"
        assert security.verify_password("newpass1", stored_hash)


class TestColumnConstraints:
    def test_uppercase_handle_rejected(self, client, fake_db, admin_token):
        resp = client.post(
            "/companies",
            json={"handle": "Acme", "name": "Acme"},
            headers=_auth(admin_token),
        )

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_job_for_uppercase_handle_rejected(self, client, fake_db, admin_token):
        resp = client.post(
            "/jobs",
            json={"title": "Dev", "companyHandle": "Acme"},
            headers=_auth(admin_token),
        )

        assert resp.status_code == 422
        assert fake_db.calls == []

    def test_email_without_at_rejected(self, client, fake_db, alice_token):
        register = client.post(
            "/auth/register",
            json={
                "username": "eve",
                "password": "password",
                "firstName": "E",
                "lastName": "V",
                "email": "eve.example.com",
            },
        )
        update = client.patch("/users/alice", json={"email": "@example.com"}, headers=_auth(alice_token))

        assert register.status_code == 422
        assert update.status_code == 422
        assert fake_db.calls == []

    def test_duplicate_company_name_on_create(self, client, fake_db, admin_token):
        fake_db.one_results.append(asyncpg.UniqueViolationError("companies_name_key"))

        resp = client.post(
            "/companies",
            json={"handle": "c2", "name": "C1"},
            headers=_auth(admin_token),
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "Duplicate company name: C1"

    def test_duplicate_company_name_on_rename(self, client, fake_db, admin_token):
        fake_db.one_results.append(asyncpg.UniqueViolationError("companies_name_key"))

        resp = client.patch("/companies/c2", json={"name": "C1"}, headers=_auth(admin_token))

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "Duplicate company name: C1"

    def test_user_cannot_grant_admin_through_update(self, client, fake_db, alice_token):
        resp = client.patch("/users/alice", json={"isAdmin": True}, headers=_auth(alice_token))

        assert resp.status_code == 422
        assert fake_db.calls == []
