"""Admin endpoints: hit metrics and dev-only reset."""

import logging

from fastapi import APIRouter, HTTPException, Request
from starlette.responses import HTMLResponse, PlainTextResponse

from chirpy.admin.metrics import HitCounter
from chirpy.config.settings import get_settings
from chirpy.users import repository as users_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


def _counter(request: Request) -> HitCounter:
    return request.app.state.hit_counter


@router.get("/metrics", response_class=HTMLResponse, summary="Fileserver hit count")
def metrics(request: Request):
    return HTMLResponse(METRICS_TEMPLATE.format(hits=_counter(request).value))


@router.post("/reset", response_class=PlainTextResponse, summary="Reset all data", description="Deletes every user and zeroes the hit counter. Only available when PLATFORM=dev.")
def reset(request: Request):
    if not get_settings().is_dev:
        logger.warning("Refused /admin/reset on platform %r", get_settings().PLATFORM)
        raise HTTPException(status_code=403, detail="forbidden")

    try:
        users_repository.delete_all()
    except Exception:
        logger.exception("Failed to delete users")
        raise HTTPException(status_code=500, detail="error deleting users")

    _counter(request).reset()
    logger.info("Reset users and hit counter")
    return PlainTextResponse("OK")
