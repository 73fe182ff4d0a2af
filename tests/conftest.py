"""Shared test fixtures.

The Supabase-backed repositories are swapped for an in-memory store so the
suite runs without a database.
"""

import os
import uuid
from datetime import datetime, timezone

os.environ.update({
    "SUPABASE_URL": "http://localhost:54321",
    "SUPABASE_SERVICE_ROLE_KEY": "test-service-role-key",
    "JWT_SECRET": "test-jwt-secret-that-is-at-least-32-bytes",
    "POLKA_KEY": "f271c81ff7084ee5b99a5091b42d486e",
    "PLATFORM": "dev",
})

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from chirpy.auth import repository as auth_repository  # noqa: E402
from chirpy.chirps import repository as chirps_repository  # noqa: E402
from chirpy.main import create_app  # noqa: E402
from chirpy.users import repository as users_repository  # noqa: E402
from chirpy.users.repository import DuplicateEmailError  # noqa: E402


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class InMemoryStore:
    """Stands in for the users, chirps and refresh_tokens tables."""

    def __init__(self):
        self.users: dict[str, dict] = {}
        self.chirps: dict[str, dict] = {}
        self.refresh_tokens: dict[str, dict] = {}

    # --- users ---

    def create_user(self, email, hashed_password):
        if self.get_user_by_email(email):
            raise DuplicateEmailError(email)
        now = _now()
        user = {
            "id": str(uuid.uuid4()),
            "email": email,
            "hashed_password": hashed_password,
            "is_chirpy_red": False,
            "created_at": now,
            "updated_at": now,
        }
        self.users[user["id"]] = user
        return dict(user)

    def get_user_by_email(self, email):
        for user in self.users.values():
            if user["email"] == email:
                return dict(user)
        return None

    def update_user(self, user_id, email, hashed_password):
        user = self.users.get(str(user_id))
        if not user:
            return None
        other = self.get_user_by_email(email)
        if other and other["id"] != user["id"]:
            raise DuplicateEmailError(email)
        user.update(email=email, hashed_password=hashed_password, updated_at=_now())
        return dict(user)

    def upgrade_user(self, user_id):
        user = self.users.get(str(user_id))
        if not user:
            return None
        user.update(is_chirpy_red=True, updated_at=_now())
        return dict(user)

    def delete_all_users(self):
        self.users.clear()
        # on delete cascade
        self.chirps.clear()
        self.refresh_tokens.clear()

    # --- chirps ---

    def create_chirp(self, user_id, body):
        now = _now()
        chirp = {"id": str(uuid.uuid4()), "user_id": str(user_id), "body": body, "created_at": now, "updated_at": now}
        self.chirps[chirp["id"]] = chirp
        return dict(chirp)

    def list_chirps(self):
        return sorted((dict(c) for c in self.chirps.values()), key=lambda c: c["created_at"])

    def get_chirp(self, chirp_id):
        chirp = self.chirps.get(str(chirp_id))
        return dict(chirp) if chirp else None

    def delete_chirp(self, chirp_id):
        return self.chirps.pop(str(chirp_id), None) is not None

    # --- refresh tokens ---

    def create_refresh_token(self, token, user_id):
        now = _now()
        row = {
            "token": token,
            "user_id": str(user_id),
            "created_at": now,
            "updated_at": now,
            "expires_at": None,
            "revoked_at": None,
        }
        self.refresh_tokens[token] = row
        return dict(row)

    def get_refresh_token(self, token):
        row = self.refresh_tokens.get(token)
        return dict(row) if row else None

    def revoke_refresh_token(self, token):
        row = self.refresh_tokens.get(token)
        if not row:
            return None
        now = _now()
        row.update(revoked_at=now, updated_at=now)
        return dict(row)


@pytest.fixture()
def store(monkeypatch):
    mem = InMemoryStore()
    monkeypatch.setattr(users_repository, "create", mem.create_user)
    monkeypatch.setattr(users_repository, "get_by_email", mem.get_user_by_email)
    monkeypatch.setattr(users_repository, "update", mem.update_user)
    monkeypatch.setattr(users_repository, "upgrade", mem.upgrade_user)
    monkeypatch.setattr(users_repository, "delete_all", mem.delete_all_users)
    monkeypatch.setattr(chirps_repository, "create", mem.create_chirp)
    monkeypatch.setattr(chirps_repository, "list_all", mem.list_chirps)
    monkeypatch.setattr(chirps_repository, "get_by_id", mem.get_chirp)
    monkeypatch.setattr(chirps_repository, "delete", mem.delete_chirp)
    monkeypatch.setattr(auth_repository, "create_refresh_token", mem.create_refresh_token)
    monkeypatch.setattr(auth_repository, "get_refresh_token", mem.get_refresh_token)
    monkeypatch.setattr(auth_repository, "revoke_refresh_token", mem.revoke_refresh_token)
    return mem


@pytest.fixture()
def client(store):
    return TestClient(create_app())


@pytest.fixture()
def test_password():
    return "SecureTestPass123"


@pytest.fixture()
def register(client, test_password):
    """Register a user with a fresh email and return the response body."""

    def _register(email: str | None = None, password: str | None = None) -> dict:
        email = email or f"user_{uuid.uuid4().hex[:8]}@example.com"
        resp = client.post("/api/users", json={"email": email, "password": password or test_password})
        assert resp.status_code == 201
        return resp.json()

    return _register


@pytest.fixture()
def login(client, register, test_password):
    """Register and log in a fresh user; return the login response body."""

    def _login() -> dict:
        user = register()
        resp = client.post("/api/login", json={"email": user["email"], "password": test_password})
        assert resp.status_code == 200
        return resp.json()

    return _login


@pytest.fixture()
def auth_header(login):
    return {"Authorization": f"Bearer {login()['token']}"}
