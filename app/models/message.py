# app/models/message.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Message(SQLModel, table=True):
    """
    Direct message between two users, optionally about a travel plan.

    Only `is_read` is ever mutated after insert.
    """

    __tablename__ = "messages"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True,
    )

    sender_id: str = Field(
        foreign_key="users.id",
        index=True,
    )

    recipient_id: str = Field(
        foreign_key="users.id",
        index=True,
    )

    travel_plan_id: str | None = Field(
        default=None,
        foreign_key="travel_plans.id",
        description="Plan the conversation is about (optional)",
    )

    content: str

    is_read: bool = Field(default=False)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )
