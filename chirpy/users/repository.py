"""Data access layer for users."""

import uuid
from datetime import datetime, timezone

from postgrest.exceptions import APIError

from chirpy.db.client import get_supabase
from chirpy.db.models import USERS

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class DuplicateEmailError(Exception):
    pass


def _execute(query, email: str):
    try:
        return query.execute()
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise DuplicateEmailError(email) from exc
        raise


def create(email: str, hashed_password: str) -> dict:
    db = get_supabase()
    result = _execute(db.table(USERS).insert({"email": email, "hashed_password": hashed_password}), email)
    return result.data[0]


def get_by_email(email: str) -> dict | None:
    db = get_supabase()
    result = db.table(USERS).select("*").eq("email", email).execute()
    return result.data[0] if result.data else None


def update(user_id: uuid.UUID, email: str, hashed_password: str) -> dict | None:
    db = get_supabase()
    query = (
        db.table(USERS)
        .update({
            "email": email,
            "hashed_password": hashed_password,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        })
        .eq("id", str(user_id))
    )
    result = _execute(query, email)
    return result.data[0] if result.data else None


def upgrade(user_id: uuid.UUID) -> dict | None:
    """Flag a user as Chirpy Red. Returns None when the user does not exist."""
    db = get_supabase()
    result = (
        db.table(USERS)
        .update({"is_chirpy_red": True, "updated_at": datetime.now(timezone.utc).isoformat()})
        .eq("id", str(user_id))
        .execute()
    )
    return result.data[0] if result.data else None


def delete_all() -> None:
    db = get_supabase()
    # PostgREST refuses an unfiltered delete
    db.table(USERS).delete().neq("id", str(uuid.UUID(int=0))).execute()
