# app/schemas/match.py
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import Field

from app.schemas.common import CamelModel

MatchStatus = Literal["pending", "accepted", "rejected"]


class MatchCreate(CamelModel):
    """
    Payload for proposing a match.

    user_one_id is the requester (from token); status starts as 'pending'.
    """

    model_config = ConfigDict(extra="forbid")

    user_two_id: str = Field(min_length=1)
    travel_plan_one_id: str = Field(min_length=1)
    travel_plan_two_id: str = Field(min_length=1)


class MatchRead(CamelModel):
    id: str
    user_one_id: str
    user_two_id: str
    travel_plan_one_id: str
    travel_plan_two_id: str
    status: MatchStatus
    created_at: datetime
