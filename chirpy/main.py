"""Chirpy: FastAPI application entry point."""

import logging

from fastapi import FastAPI
from starlette.responses import PlainTextResponse
from starlette.staticfiles import StaticFiles

from chirpy.admin.metrics import HitCounter
from chirpy.admin.routes import router as admin_router
from chirpy.auth.routes import router as auth_router
from chirpy.chirps.routes import router as chirps_router
from chirpy.config.settings import get_settings
from chirpy.middleware.error_handler import register_error_handlers
from chirpy.middleware.metrics import FileserverHitsMiddleware
from chirpy.users.routes import router as users_router
from chirpy.webhooks.routes import router as webhooks_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Chirpy",
        description=(
            "A small social network of 140-character chirps.\n\n"
            "## Authentication\n"
            "Protected endpoints take `Authorization: Bearer <jwt>`. "
            "`/api/refresh` and `/api/revoke` take the refresh token as the bearer token. "
            "The Polka webhook takes `Authorization: ApiKey <key>`."
        ),
        version="1.0.0",
        openapi_tags=[
            {"name": "Health", "description": "Health check"},
            {"name": "Users", "description": "Registration and profile updates"},
            {"name": "Auth", "description": "Login, session refresh, refresh token revocation"},
            {"name": "Chirps", "description": "Create, list, fetch and delete chirps"},
            {"name": "Admin", "description": "Fileserver metrics and dev reset"},
            {"name": "Webhooks", "description": "Payment provider events"},
        ],
    )

    # One counter per app, shared by the middleware and the admin routes
    counter = HitCounter()
    app.state.hit_counter = counter
    app.add_middleware(FileserverHitsMiddleware, counter=counter)

    register_error_handlers(app)

    app.include_router(users_router)
    app.include_router(auth_router)
    app.include_router(chirps_router)
    app.include_router(admin_router)
    app.include_router(webhooks_router)

    @app.get("/api/healthz", tags=["Health"], response_class=PlainTextResponse, summary="Health check")
    def health_check():
        return PlainTextResponse("OK")

    app.mount("/app", StaticFiles(directory=settings.FILESERVER_ROOT, html=True), name="app")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("Starting server ...")
    uvicorn.run("chirpy.main:app", host="0.0.0.0", port=8080)
