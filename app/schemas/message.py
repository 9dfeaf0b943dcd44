# app/schemas/message.py
from datetime import datetime

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import Field

from app.schemas.common import CamelModel, drop_server_fields
from app.schemas.user import UserRead


# Assigned by the server; silently dropped from create payloads
MESSAGE_SERVER_FIELDS = {"id", "sender_id", "is_read", "created_at"}


class MessageCreate(CamelModel):
    """
    Payload for sending a message.

    sender_id is taken from the token and is_read always starts False;
    both are dropped from the payload if sent, like id and created_at.
    """

    model_config = ConfigDict(extra="forbid")

    recipient_id: str = Field(min_length=1)
    content: str = Field(max_length=5000)
    travel_plan_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def strip_server_fields(cls, data):
        return drop_server_fields(data, MESSAGE_SERVER_FIELDS)

    @field_validator("content")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty")
        return v


class MessageRead(CamelModel):
    id: str
    sender_id: str
    recipient_id: str
    travel_plan_id: str | None = None
    content: str
    is_read: bool
    created_at: datetime


class MessageWithUsers(MessageRead):
    """Message enriched with both participants' profiles."""

    sender: UserRead
    recipient: UserRead
