"""Pydantic schemas for chirp requests and responses."""

import uuid
from datetime import datetime

from pydantic import BaseModel

MAX_CHIRP_LENGTH = 140


class CreateChirpRequest(BaseModel):
    body: str


class ChirpResponse(BaseModel):
    id: uuid.UUID
    body: str
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
