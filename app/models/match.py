# app/models/match.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Match(SQLModel, table=True):
    """
    Pairing proposal between two users' travel plans.

    user_one / travel_plan_one belong to the user who proposed the match.
    """

    __tablename__ = "matches"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True,
    )

    user_one_id: str = Field(foreign_key="users.id", index=True)
    user_two_id: str = Field(foreign_key="users.id", index=True)

    travel_plan_one_id: str = Field(foreign_key="travel_plans.id")
    travel_plan_two_id: str = Field(foreign_key="travel_plans.id")

    # pending | accepted | rejected
    status: str = Field(
        default="pending",
        index=True,
        description="Match status lifecycle",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
