"""Tests for registration, login, token rotation and account management."""

from datetime import datetime, timedelta

from sqlmodel import Session, select

from app.core.config import settings
from app.core.security import create_access_token, hash_refresh_token
from app.models.refresh_token import RefreshToken
from app.models.user import User


def _login(client, email="lifter@example.com", password="strongpass1"):
    return client.post("/auth/login", json={"email": email, "password": password})


def _deactivate(engine, user_id):
    with Session(engine) as session:
        user = session.get(User, user_id)
        user.is_active = False
        session.add(user)
        session.commit()


# ======================================================================
# Registration
# ======================================================================


class TestRegister:
    def test_returns_user_and_tokens(self, client):
        response = client.post("/auth/register", json={"email": "new@example.com", "password": "strongpass1"})
        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "new@example.com"
        assert body["user"]["id"]
        assert "hashed_password" not in body["user"]
        assert body["access_token"]
        assert body["refresh_token"]
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    def test_email_is_normalised(self, client):
        response = client.post("/auth/register", json={"email": "  Mixed@Example.COM ", "password": "strongpass1"})
        assert response.status_code == 201
        assert response.json()["user"]["email"] == "mixed@example.com"

    def test_duplicate_email_conflicts(self, client, lifter):
        response = client.post("/auth/register", json={"email": "LIFTER@example.com", "password": "strongpass1"})
        assert response.status_code == 409
        assert response.json()["detail"] == "User already exists"

    def test_short_password_is_invalid_input(self, client):
        response = client.post("/auth/register", json={"email": "a@example.com", "password": "short"})
        assert response.status_code == 400
        body = response.json()
        assert body["detail"] == "Invalid input"
        assert body["issues"]

    def test_bad_email_is_invalid_input(self, client):
        response = client.post("/auth/register", json={"email": "not-an-email", "password": "strongpass1"})
        assert response.status_code == 400


# ======================================================================
# Login
# ======================================================================


class TestLogin:
    def test_valid_credentials(self, client, lifter):
        response = _login(client)
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == lifter["user"]["id"]
        assert body["refresh_token"] != lifter["refresh_token"]

    def test_email_case_insensitive(self, client, lifter):
        assert _login(client, email=" Lifter@Example.com").status_code == 200

    def test_wrong_password(self, client, lifter):
        response = _login(client, password="wrongpass1")
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"

    def test_unknown_user(self, client):
        assert _login(client, email="ghost@example.com").status_code == 401

    def test_empty_password_is_invalid_input(self, client):
        assert _login(client, password="").status_code == 400

    def test_oauth2_form_login(self, client, lifter):
        response = client.post("/auth/token", data={"username": "lifter@example.com", "password": "strongpass1"})
        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_inactive_account_is_forbidden(self, client, engine, lifter):
        _deactivate(engine, lifter["user"]["id"])
        response = _login(client)
        assert response.status_code == 403
        assert response.json()["detail"] == "User account is inactive"


# ======================================================================
# Current user
# ======================================================================


class TestMe:
    def test_requires_token(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_rejects_bad_token(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_rejects_expired_token(self, client, lifter):
        token = create_access_token({"sub": lifter["user"]["id"]}, expires_delta=timedelta(seconds=-1))
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_returns_user(self, client, lifter):
        response = client.get("/auth/me", headers=lifter["headers"])
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "lifter@example.com"

    def test_rejects_inactive_user(self, client, engine, lifter):
        _deactivate(engine, lifter["user"]["id"])
        response = client.get("/auth/me", headers=lifter["headers"])
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


# ======================================================================
# Refresh rotation and logout
# ======================================================================


class TestRefresh:
    def test_rotation_issues_new_pair(self, client, lifter):
        response = client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]})
        assert response.status_code == 200
        body = response.json()
        assert body["refresh_token"] != lifter["refresh_token"]
        me = client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.status_code == 200

    def test_refresh_token_is_single_use(self, client, lifter):
        first = client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]})
        assert first.status_code == 200
        replay = client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]})
        assert replay.status_code == 401
        assert replay.json()["detail"] == "Invalid refresh token"
        # The rotated token keeps working
        rotated = client.post("/auth/refresh", json={"refresh_token": first.json()["refresh_token"]})
        assert rotated.status_code == 200

    def test_unknown_token(self, client):
        assert client.post("/auth/refresh", json={"refresh_token": "made-up"}).status_code == 401

    def test_missing_token_is_invalid_input(self, client):
        assert client.post("/auth/refresh", json={}).status_code == 400

    def test_expired_token_is_rejected_and_removed(self, client, engine, lifter):
        token_hash = hash_refresh_token(lifter["refresh_token"])
        with Session(engine) as session:
            stored = session.exec(select(RefreshToken).where(RefreshToken.token_hash == token_hash)).one()
            stored.expires_at = datetime.utcnow() - timedelta(minutes=1)
            session.add(stored)
            session.commit()

        response = client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]})
        assert response.status_code == 401

        with Session(engine) as session:
            remaining = session.exec(select(RefreshToken).where(RefreshToken.token_hash == token_hash)).first()
            assert remaining is None

    def test_tokens_are_stored_hashed(self, engine, lifter):
        with Session(engine) as session:
            hashes = session.exec(select(RefreshToken.token_hash)).all()
        assert lifter["refresh_token"] not in hashes
        assert hash_refresh_token(lifter["refresh_token"]) in hashes

    def test_inactive_user_cannot_refresh(self, client, engine, lifter):
        _deactivate(engine, lifter["user"]["id"])
        response = client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]})
        assert response.status_code == 401
        # The presented token is consumed all the same
        with Session(engine) as session:
            hashes = session.exec(select(RefreshToken.token_hash)).all()
        assert hash_refresh_token(lifter["refresh_token"]) not in hashes


class TestSessionCap:
    def test_oldest_sessions_are_evicted(self, client, lifter, monkeypatch):
        monkeypatch.setattr(settings, "MAX_SESSIONS_PER_USER", 2)

        second = _login(client).json()
        third = _login(client).json()

        # The registration session was the oldest of three
        assert client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]}).status_code == 401
        assert client.post("/auth/refresh", json={"refresh_token": second["refresh_token"]}).status_code == 200
        assert client.post("/auth/refresh", json={"refresh_token": third["refresh_token"]}).status_code == 200

    def test_cap_is_per_user(self, client, lifter, other, engine, monkeypatch):
        monkeypatch.setattr(settings, "MAX_SESSIONS_PER_USER", 1)
        _login(client)

        with Session(engine) as session:
            user_ids = session.exec(select(RefreshToken.user_id)).all()
        assert sorted(user_ids) == sorted([lifter["user"]["id"], other["user"]["id"]])


class TestLogout:
    def test_logout_revokes_refresh_token(self, client, lifter):
        response = client.post("/auth/logout", json={"refresh_token": lifter["refresh_token"]})
        assert response.status_code == 204
        assert client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]}).status_code == 401

    def test_logout_unknown_token_is_noop(self, client):
        assert client.post("/auth/logout", json={"refresh_token": "made-up"}).status_code == 204


# ======================================================================
# Account management
# ======================================================================


class TestChangePassword:
    def test_wrong_current_password(self, client, lifter):
        response = client.put("/auth/account/password", headers=lifter["headers"],
                              json={"current_password": "nope", "new_password": "newstrongpass"})
        assert response.status_code == 401

    def test_new_password_too_short(self, client, lifter):
        response = client.put("/auth/account/password", headers=lifter["headers"],
                              json={"current_password": "strongpass1", "new_password": "short"})
        assert response.status_code == 400

    def test_change_revokes_sessions(self, client, lifter):
        response = client.put("/auth/account/password", headers=lifter["headers"],
                              json={"current_password": "strongpass1", "new_password": "newstrongpass"})
        assert response.status_code == 204

        assert client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]}).status_code == 401
        assert _login(client).status_code == 401
        assert _login(client, password="newstrongpass").status_code == 200

    def test_requires_auth(self, client):
        response = client.put("/auth/account/password",
                              json={"current_password": "strongpass1", "new_password": "newstrongpass"})
        assert response.status_code == 401


class TestDeleteAccount:
    def test_deletes_user_and_owned_data(self, client, lifter, other):
        headers = lifter["headers"]
        plan = client.post("/training/plans", headers=headers, json={"title": "Block", "content": "5x5"}).json()
        client.put(f"/training/plans/{plan['id']}", headers=headers, json={"title": "Block", "content": "3x3"})
        client.post("/training/workouts", headers=headers, json={"exercise": "Squat", "reps": 5, "weight": 100})
        client.get("/training/exercises", headers=headers)
        client.put("/training/profile", headers=headers, json={"first_name": "Ann"})
        client.post(f"/training/follows/{other['user']['id']}", headers=headers)
        client.post(f"/training/follows/{lifter['user']['id']}", headers=other["headers"])
        client.post("/training/coach/athletes", headers=other["headers"], json={"athlete_id": lifter["user"]["id"]})
        client.post("/training/coach/comments", headers=other["headers"],
                    json={"athlete_id": lifter["user"]["id"], "plan_id": plan["id"], "comment": "Nice"})

        response = client.delete("/auth/account", headers=headers)
        assert response.status_code == 204

        assert client.get("/auth/me", headers=headers).status_code == 401
        assert _login(client).status_code == 401
        assert client.post("/auth/refresh", json={"refresh_token": lifter["refresh_token"]}).status_code == 401

        # The other user is untouched but no longer sees the deleted account
        other_profile = client.get("/training/profile", headers=other["headers"]).json()
        assert other_profile["followers"] == 0
        assert other_profile["following"] == 0
        assert client.get("/training/coach/athletes", headers=other["headers"]).json() == []

    def test_email_can_be_reused_after_deletion(self, client, lifter):
        client.delete("/auth/account", headers=lifter["headers"])
        response = client.post("/auth/register", json={"email": "lifter@example.com", "password": "strongpass1"})
        assert response.status_code == 201
