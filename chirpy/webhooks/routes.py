"""Payment provider (Polka) webhook."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from chirpy.auth.tokens import MissingAuthHeaderError, get_api_key
from chirpy.config.settings import get_settings
from chirpy.users import repository as users_repository
from chirpy.webhooks.schemas import USER_UPGRADED, PolkaWebhookRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/polka", tags=["Webhooks"])


def verify_polka_key(request: Request) -> None:
    try:
        api_key = get_api_key(request.headers)
    except MissingAuthHeaderError:
        logger.warning("Polka webhook without Authorization header")
        raise HTTPException(status_code=401, detail="missing authorization header")
    if api_key != get_settings().POLKA_KEY:
        logger.warning("Polka webhook with invalid API key")
        raise HTTPException(status_code=401, detail="invalid API key")


@router.post("/webhooks", status_code=204, dependencies=[Depends(verify_polka_key)], summary="Polka payment events", description="Upgrades a user to Chirpy Red on `user.upgraded`. Other events are acknowledged and ignored.")
def polka_webhook(body: PolkaWebhookRequest):
    if body.event != USER_UPGRADED:
        return Response(status_code=204)

    try:
        user_id = uuid.UUID(body.data.user_id)
    except ValueError:
        logger.warning("Polka webhook with unparsable user id %r", body.data.user_id)
        raise HTTPException(status_code=404, detail="user not found")

    if not users_repository.upgrade(user_id):
        logger.warning("Polka webhook for unknown user %s", user_id)
        raise HTTPException(status_code=404, detail="user not found")

    logger.info("Upgraded user %s to Chirpy Red", user_id)
    return Response(status_code=204)
