"""Auth endpoints: login, refresh, revoke."""

from fastapi import APIRouter, Depends, Response

from chirpy.auth import service
from chirpy.auth.dependencies import require_bearer_token
from chirpy.auth.schemas import LoginRequest, LoginResponse, RefreshResponse

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post("/login", response_model=LoginResponse, summary="Login", description="Authenticate with email and password, returns a session token and a refresh token.")
def login(body: LoginRequest):
    return service.login(body.email, body.password)


@router.post("/refresh", response_model=RefreshResponse, summary="Refresh session token", description="Exchange the refresh token in the Authorization header for a new session token.")
def refresh(refresh_token: str = Depends(require_bearer_token)):
    return RefreshResponse(token=service.refresh(refresh_token))


@router.post("/revoke", status_code=204, summary="Revoke refresh token", description="Revoke the refresh token in the Authorization header.")
def revoke(refresh_token: str = Depends(require_bearer_token)):
    service.revoke(refresh_token)
    return Response(status_code=204)
