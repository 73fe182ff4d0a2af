"""Business logic for chirps with ownership verification."""

import logging
import uuid

from fastapi import HTTPException

from chirpy.chirps import repository
from chirpy.chirps.filters import clean_body
from chirpy.chirps.schemas import MAX_CHIRP_LENGTH

logger = logging.getLogger(__name__)


def verify_ownership(chirp: dict, user_id: uuid.UUID) -> None:
    if str(chirp["user_id"]) != str(user_id):
        logger.warning("User %s may not modify chirp %s owned by %s", user_id, chirp["id"], chirp["user_id"])
        raise HTTPException(status_code=403, detail="forbidden")


def _parse_id(chirp_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(chirp_id)
    except ValueError:
        logger.info("Unparsable chirp id %r", chirp_id)
        raise HTTPException(status_code=404, detail="chirp not found")


def create_chirp(user_id: uuid.UUID, body: str) -> dict:
    if len(body) > MAX_CHIRP_LENGTH:
        raise HTTPException(status_code=400, detail="Chirp is too long")
    return repository.create(user_id, clean_body(body))


def list_chirps() -> list[dict]:
    return repository.list_all()


def get_chirp(chirp_id: str) -> dict:
    chirp = repository.get_by_id(_parse_id(chirp_id))
    if not chirp:
        raise HTTPException(status_code=404, detail="chirp not found")
    return chirp


def delete_chirp(chirp_id: str, user_id: uuid.UUID) -> None:
    chirp = get_chirp(chirp_id)
    verify_ownership(chirp, user_id)
    repository.delete(chirp["id"])
