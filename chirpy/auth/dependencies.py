"""Auth dependencies for FastAPI route injection."""

import logging
import uuid
from dataclasses import dataclass

from fastapi import HTTPException, Request

from chirpy.auth.jwt import TokenError, validate_jwt
from chirpy.auth.tokens import MissingAuthHeaderError, get_bearer_token
from chirpy.config.settings import get_settings

logger = logging.getLogger(__name__)


@dataclass
class CurrentUser:
    id: uuid.UUID


def unauthorized() -> HTTPException:
    return HTTPException(status_code=401, detail="unauthorized")


def require_bearer_token(request: Request) -> str:
    """FastAPI dependency: the raw bearer token, or 401."""
    try:
        return get_bearer_token(request.headers)
    except MissingAuthHeaderError as exc:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        raise unauthorized()


async def get_current_user(request: Request) -> CurrentUser:
    """FastAPI dependency: authenticate via a Bearer session token."""
    token = require_bearer_token(request)
    try:
        user_id = validate_jwt(token, get_settings().JWT_SECRET)
    except TokenError as exc:
        logger.warning("JWT validation failed on %s %s: %s", request.method, request.url.path, exc)
        raise unauthorized()
    return CurrentUser(id=user_id)
