# app/schemas/user.py
from datetime import date, datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import Field

from app.schemas.common import CamelModel, normalize_interests


class UserRead(CamelModel):
    """Profile returned to clients (also embedded in plans and messages)."""

    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    bio: str | None = None
    location: str | None = None
    date_of_birth: date | None = None
    interests: list[str] = []
    created_at: datetime
    updated_at: datetime


class UserUpdate(CamelModel):
    """
    Partial profile update for the authenticated user.

    Identity fields (id, email) come from the auth provider and
    cannot be changed here.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    profile_image_url: str | None = None
    bio: str | None = Field(default=None, max_length=1000)
    location: str | None = Field(default=None, max_length=200)
    date_of_birth: date | None = None
    interests: list[str] | None = None

    @field_validator("first_name", "last_name", "bio", "location", "profile_image_url")
    @classmethod
    def normalize_text(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None

    @field_validator("interests")
    @classmethod
    def clean_interests(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        return normalize_interests(v)

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, v: date | None) -> date | None:
        if v is not None and v > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return v
