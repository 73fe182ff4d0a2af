"""Pydantic schemas for user requests and responses."""

import uuid
from datetime import datetime

from pydantic import BaseModel


# --- Requests ---

class UserRequest(BaseModel):
    email: str
    password: str = ""


# --- Responses ---

class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    created_at: datetime
    updated_at: datetime
    is_chirpy_red: bool = False

    model_config = {"from_attributes": True}
