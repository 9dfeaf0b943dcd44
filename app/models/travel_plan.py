# app/models/travel_plan.py
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class TravelPlan(SQLModel, table=True):
    """
    A trip a user intends to take.

    Deleting a plan only flips `is_active` (soft delete) so that messages
    and matches referring to it keep a valid foreign key.
    """

    __tablename__ = "travel_plans"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True,
    )

    user_id: str = Field(
        foreign_key="users.id",
        index=True,
        description="Owner of the plan",
    )

    destination: str = Field(
        max_length=200,
        index=True,
    )

    start_date: date
    end_date: date

    description: str | None = None

    interests: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    is_active: bool = Field(
        default=True,
        index=True,
        description="False once the owner deletes the plan",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
