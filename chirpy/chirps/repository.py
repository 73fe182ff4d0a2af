"""Data access layer for chirps."""

import uuid

from chirpy.db.client import get_supabase
from chirpy.db.models import CHIRPS


def create(user_id: uuid.UUID, body: str) -> dict:
    db = get_supabase()
    result = db.table(CHIRPS).insert({"user_id": str(user_id), "body": body}).execute()
    return result.data[0]


def list_all() -> list[dict]:
    db = get_supabase()
    result = db.table(CHIRPS).select("*").order("created_at").execute()
    return result.data


def get_by_id(chirp_id: uuid.UUID) -> dict | None:
    db = get_supabase()
    result = db.table(CHIRPS).select("*").eq("id", str(chirp_id)).execute()
    return result.data[0] if result.data else None


def delete(chirp_id: uuid.UUID) -> bool:
    db = get_supabase()
    result = db.table(CHIRPS).delete().eq("id", str(chirp_id)).execute()
    return bool(result.data)
