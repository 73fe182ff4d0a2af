"""Authorization header parsing and refresh token generation."""

import secrets
from collections.abc import Mapping

BEARER_PREFIX = "Bearer "
API_KEY_PREFIX = "ApiKey "


class MissingAuthHeaderError(Exception):
    pass


def _authorization(headers: Mapping[str, str]) -> str:
    value = headers.get("Authorization") or headers.get("authorization")
    if not value:
        raise MissingAuthHeaderError("missing Authorization header")
    return value


def get_bearer_token(headers: Mapping[str, str]) -> str:
    return _authorization(headers).removeprefix(BEARER_PREFIX)


def get_api_key(headers: Mapping[str, str]) -> str:
    return _authorization(headers).removeprefix(API_KEY_PREFIX)


def make_refresh_token() -> str:
    # 32 random bytes, 64 hex characters
    return secrets.token_hex(32)
