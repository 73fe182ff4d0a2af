"""Session token (JWT) creation and validation."""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import InvalidSubjectError

ALGORITHM = "HS256"
ISSUER = "chirpy"


class TokenError(Exception):
    """A session token could not be validated."""


class TokenSignatureError(TokenError):
    pass


class TokenExpiredError(TokenError):
    pass


class TokenNotYetValidError(TokenError):
    pass


class MalformedSubjectError(TokenError):
    pass


def make_jwt(
    user_id: uuid.UUID,
    secret: str,
    expires_in: timedelta,
    issued_at: datetime | None = None,
) -> str:
    now = issued_at or datetime.now(timezone.utc)
    payload = {
        "iss": ISSUER,
        "sub": str(user_id),
        "iat": now,
        "nbf": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def validate_jwt(token: str, secret: str) -> uuid.UUID:
    """Verify signature, exp and nbf, and return the subject as a user id.

    Raises a TokenError subclass naming the cause of the failure.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.InvalidSignatureError as exc:
        raise TokenSignatureError("token signature is invalid") from exc
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError("token is expired") from exc
    except jwt.ImmatureSignatureError as exc:
        raise TokenNotYetValidError("token is not valid yet") from exc
    except InvalidSubjectError as exc:
        raise MalformedSubjectError(f"token subject is invalid: {exc}") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenError(f"token is invalid: {exc}") from exc

    subject = payload.get("sub")
    if not subject:
        raise MalformedSubjectError("token has no subject")
    if not isinstance(subject, str):
        raise MalformedSubjectError(f"token subject is not a string: {subject!r}")
    try:
        return uuid.UUID(subject)
    except (TypeError, ValueError) as exc:
        raise MalformedSubjectError(f"token subject is not a user id: {subject!r}") from exc
