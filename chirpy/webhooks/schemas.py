"""Pydantic schemas for Polka webhook payloads."""

from pydantic import BaseModel, Field

USER_UPGRADED = "user.upgraded"


class WebhookData(BaseModel):
    user_id: str = ""


class PolkaWebhookRequest(BaseModel):
    event: str
    data: WebhookData = Field(default_factory=WebhookData)
