# app/models/user.py
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Persistent traveler profile.

    Identity:
      - id: MUST match the auth provider's user id (JWT "sub")

    Rows are created/updated by upsert whenever an authenticated request
    arrives; they are never hard-deleted. Passwords live with the auth
    provider, not here.
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True,
        description="Matches the auth provider's user id",
    )

    email: str | None = Field(
        default=None,
        unique=True,
        index=True,
        description="Email from the auth provider (optional)",
    )

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    profile_image_url: str | None = Field(
        default=None,
        description="Avatar URL provided by the auth provider or the user",
    )

    bio: str | None = None
    location: str | None = Field(default=None, max_length=200)
    date_of_birth: date | None = None

    # Ordered interest tags, e.g. ["Food", "Hiking"]
    interests: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
