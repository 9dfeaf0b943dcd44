# app/schemas/travel_plan.py
from datetime import date, datetime

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import Field

from app.schemas.common import CamelModel, drop_server_fields, normalize_interests
from app.schemas.user import UserRead


# Assigned by the server; silently dropped from create payloads
PLAN_SERVER_FIELDS = {"id", "user_id", "is_active", "created_at", "updated_at"}


class TravelPlanCreate(CamelModel):
    """
    Payload for creating a travel plan.

    Backend derives (and drops from the payload if sent):
      - id
      - user_id from token
      - is_active = True
      - created_at / updated_at
    """

    model_config = ConfigDict(extra="forbid")

    destination: str = Field(max_length=200)
    start_date: date
    end_date: date
    description: str | None = None
    interests: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def strip_server_fields(cls, data):
        return drop_server_fields(data, PLAN_SERVER_FIELDS)

    @field_validator("destination")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("destination cannot be empty")
        return v

    @field_validator("description")
    @classmethod
    def normalize_description(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None

    @field_validator("interests")
    @classmethod
    def clean_interests(cls, v: list[str]) -> list[str]:
        return normalize_interests(v)

    @model_validator(mode="after")
    def check_date_order(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must be on or after startDate")
        return self


class TravelPlanUpdate(CamelModel):
    """
    Partial update of a travel plan by its owner.

    When only one of the dates is given, the order check against the
    stored date happens in the service.
    """

    model_config = ConfigDict(extra="forbid")

    destination: str | None = Field(default=None, max_length=200)
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = None
    interests: list[str] | None = None
    is_active: bool | None = None

    @field_validator("destination")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("destination cannot be empty")
        return v

    @field_validator("interests")
    @classmethod
    def clean_interests(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        return normalize_interests(v)

    @model_validator(mode="after")
    def check_date_order(self):
        if (
            self.start_date is not None
            and self.end_date is not None
            and self.end_date < self.start_date
        ):
            raise ValueError("endDate must be on or after startDate")
        return self


class TravelPlanRead(CamelModel):
    """Travel plan representation for clients."""

    id: str
    user_id: str
    destination: str
    start_date: date
    end_date: date
    description: str | None = None
    interests: list[str] = []
    is_active: bool
    created_at: datetime
    updated_at: datetime


class TravelPlanWithOwner(TravelPlanRead):
    """Discovery feed entry: a plan with its owner's profile embedded."""

    user: UserRead
