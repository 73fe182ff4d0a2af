"""Business logic for registration and profile updates."""

import logging
import uuid

from fastapi import HTTPException

from chirpy.auth.passwords import PasswordHashError, hash_password
from chirpy.users import repository
from chirpy.users.repository import DuplicateEmailError

logger = logging.getLogger(__name__)


def _hash_or_fail(password: str) -> str:
    if not password:
        raise HTTPException(status_code=400, detail="password required")
    try:
        return hash_password(password)
    except PasswordHashError as exc:
        logger.error("Failed to hash password: %s", exc)
        raise HTTPException(status_code=500, detail="failed hashing password")


def create_user(email: str, password: str) -> dict:
    hashed = _hash_or_fail(password)
    try:
        return repository.create(email, hashed)
    except DuplicateEmailError:
        raise HTTPException(status_code=409, detail="email already registered")


def update_user(user_id: uuid.UUID, email: str, password: str) -> dict:
    hashed = _hash_or_fail(password)
    try:
        user = repository.update(user_id, email, hashed)
    except DuplicateEmailError:
        raise HTTPException(status_code=409, detail="email already registered")
    if not user:
        # token subject points at a deleted user
        logger.warning("Update for missing user %s", user_id)
        raise HTTPException(status_code=404, detail="user not found")
    return user
