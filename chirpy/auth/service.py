"""Login, session refresh and refresh token revocation."""

import logging
from datetime import timedelta

from fastapi import HTTPException

from chirpy.auth import repository
from chirpy.auth.jwt import make_jwt
from chirpy.auth.passwords import PasswordHashError, PasswordMismatchError, check_password_hash
from chirpy.auth.tokens import make_refresh_token
from chirpy.config.settings import get_settings
from chirpy.users import repository as users_repository

logger = logging.getLogger(__name__)

BAD_CREDENTIALS = "Incorrect email or password"


def _session_token(user_id) -> str:
    settings = get_settings()
    return make_jwt(
        user_id,
        settings.JWT_SECRET,
        timedelta(seconds=settings.JWT_ACCESS_TOKEN_EXPIRE_SECONDS),
    )


def login(email: str, password: str) -> dict:
    user = users_repository.get_by_email(email)
    if not user:
        logger.warning("Login failed: unknown email")
        raise HTTPException(status_code=401, detail=BAD_CREDENTIALS)

    try:
        check_password_hash(user["hashed_password"], password)
    except PasswordMismatchError:
        logger.warning("Login failed: wrong password for user %s", user["id"])
        raise HTTPException(status_code=401, detail=BAD_CREDENTIALS)
    except PasswordHashError as exc:
        logger.error("Login failed: unusable password hash for user %s: %s", user["id"], exc)
        raise HTTPException(status_code=401, detail=BAD_CREDENTIALS)

    refresh_token = make_refresh_token()
    repository.create_refresh_token(refresh_token, user["id"])

    return {**user, "token": _session_token(user["id"]), "refresh_token": refresh_token}


def refresh(refresh_token: str) -> str:
    """Issue a new session token for a known, unrevoked refresh token.

    Unknown and revoked tokens both fail with the same 401 so callers cannot
    probe which tokens exist.
    """
    row = repository.get_refresh_token(refresh_token)
    if not row:
        logger.warning("Refresh failed: unknown refresh token")
        raise HTTPException(status_code=401, detail="unauthorized")
    if row.get("revoked_at"):
        logger.warning("Refresh failed: token revoked at %s", row["revoked_at"])
        raise HTTPException(status_code=401, detail="unauthorized")
    return _session_token(row["user_id"])


def revoke(refresh_token: str) -> None:
    try:
        repository.revoke_refresh_token(refresh_token)
    except Exception:
        logger.exception("Failed to revoke refresh token")
        raise HTTPException(status_code=500, detail="failed to revoke token")
