# app/repositories/travel_plan_repo.py
from datetime import date, datetime, timezone
from typing import Any

from sqlmodel import Session, select

from app.models.travel_plan import TravelPlan
from app.models.user import User


def _escape_like(value: str) -> str:
    """Treat % and _ in user input as literal characters."""
    return (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


class TravelPlanRepository:
    """
    Data access layer for travel plans.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, plan_id: str) -> TravelPlan | None:
        """Return a plan by id, including soft-deleted ones."""
        return session.get(TravelPlan, plan_id)

    def list_for_user(
        self,
        session: Session,
        user_id: str,
        only_active: bool = True,
    ) -> list[TravelPlan]:
        stmt = select(TravelPlan).where(TravelPlan.user_id == user_id)
        if only_active:
            stmt = stmt.where(TravelPlan.is_active == True)
        stmt = stmt.order_by(TravelPlan.created_at.desc())
        return session.exec(stmt).all()

    def create(self, session: Session, plan: TravelPlan) -> TravelPlan:
        session.add(plan)
        session.commit()
        session.refresh(plan)
        return plan

    def update(
        self,
        session: Session,
        plan: TravelPlan,
        updates: dict[str, Any],
    ) -> TravelPlan:
        """Apply field updates and stamp updated_at."""
        for key, value in updates.items():
            setattr(plan, key, value)
        plan.updated_at = datetime.now(timezone.utc)
        session.add(plan)
        session.commit()
        session.refresh(plan)
        return plan

    def soft_delete(self, session: Session, plan_id: str) -> bool:
        """
        Mark a plan inactive.

        Returns True when a row matched, so deleting an already
        inactive plan still reports success.
        """
        plan = self.get_by_id(session, plan_id)
        if plan is None:
            return False
        plan.is_active = False
        plan.updated_at = datetime.now(timezone.utc)
        session.add(plan)
        session.commit()
        return True

    def search_active(
        self,
        session: Session,
        exclude_user_id: str | None = None,
        destination: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[tuple[TravelPlan, User]]:
        """
        Active plans joined with their owner, newest first.

        Date filters select plans overlapping [start_date, end_date].
        """
        stmt = (
            select(TravelPlan, User)
            .join(User, TravelPlan.user_id == User.id)
            .where(TravelPlan.is_active == True)
        )
        if exclude_user_id is not None:
            stmt = stmt.where(TravelPlan.user_id != exclude_user_id)
        if destination:
            pattern = f"%{_escape_like(destination)}%"
            stmt = stmt.where(TravelPlan.destination.ilike(pattern, escape="\\"))
        if start_date is not None:
            stmt = stmt.where(TravelPlan.end_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(TravelPlan.start_date <= end_date)

        stmt = stmt.order_by(TravelPlan.created_at.desc())
        return session.exec(stmt).all()
