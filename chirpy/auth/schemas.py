"""Pydantic schemas for login and token refresh."""

from pydantic import BaseModel

from chirpy.users.schemas import UserResponse


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(UserResponse):
    token: str
    refresh_token: str


class RefreshResponse(BaseModel):
    token: str
