"""Data access layer for refresh tokens."""

import uuid
from datetime import datetime, timezone

from chirpy.db.client import get_supabase
from chirpy.db.models import REFRESH_TOKENS


def create_refresh_token(token: str, user_id: uuid.UUID) -> dict:
    db = get_supabase()
    # expires_at stays null: refresh tokens are only invalidated by revocation
    result = db.table(REFRESH_TOKENS).insert({"token": token, "user_id": str(user_id)}).execute()
    return result.data[0]


def get_refresh_token(token: str) -> dict | None:
    db = get_supabase()
    result = db.table(REFRESH_TOKENS).select("*").eq("token", token).execute()
    return result.data[0] if result.data else None


def revoke_refresh_token(token: str) -> dict | None:
    db = get_supabase()
    now = datetime.now(timezone.utc).isoformat()
    result = (
        db.table(REFRESH_TOKENS)
        .update({"revoked_at": now, "updated_at": now})
        .eq("token", token)
        .execute()
    )
    return result.data[0] if result.data else None
