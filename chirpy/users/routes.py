"""User endpoints: register, update own profile."""

from fastapi import APIRouter, Depends

from chirpy.auth.dependencies import CurrentUser, get_current_user
from chirpy.users import service
from chirpy.users.schemas import UserRequest, UserResponse

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", status_code=201, response_model=UserResponse, summary="Register a user")
def create(body: UserRequest):
    return service.create_user(body.email, body.password)


@router.put("", response_model=UserResponse, summary="Update the authenticated user", description="Replace the caller's email and password.")
def update(body: UserRequest, user: CurrentUser = Depends(get_current_user)):
    return service.update_user(user.id, body.email, body.password)
