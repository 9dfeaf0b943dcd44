# app/services/travel_plan_service.py
import logging
from datetime import date

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import Settings, get_settings
from app.models.travel_plan import TravelPlan
from app.repositories.travel_plan_repo import TravelPlanRepository
from app.schemas.travel_plan import (
    TravelPlanCreate,
    TravelPlanRead,
    TravelPlanUpdate,
    TravelPlanWithOwner,
)
from app.schemas.user import UserRead

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by an update
NON_NULLABLE_FIELDS = {"destination", "start_date", "end_date", "interests", "is_active"}


class TravelPlanService:
    """
    Business logic for travel plans.

    Responsibilities:
      - discovery feed (other users' active plans)
      - ownership checks for update / delete
      - date order validation on partial updates
    """

    def __init__(self, repo: TravelPlanRepository, settings: Settings | None = None):
        self.repo = repo
        self.settings = settings or get_settings()

    # -------- Queries --------

    def list_own(self, session: Session, user_id: str) -> list[TravelPlanRead]:
        """The caller's active plans, newest first."""
        plans = self.repo.list_for_user(session, user_id)
        return [TravelPlanRead.model_validate(plan) for plan in plans]

    def get_plan(self, session: Session, plan_id: str) -> TravelPlan:
        """
        Get a plan by id, active or not.

        Raises:
            HTTPException(404): if not found.
        """
        plan = self.repo.get_by_id(session, plan_id)
        if not plan:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Travel plan not found",
            )
        return plan

    def discover(
        self,
        session: Session,
        user_id: str,
        destination: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[TravelPlanWithOwner]:
        """
        Other users' active plans with the owner embedded, newest first.

        Filters are only applied when DISCOVERY_APPLY_FILTERS is set;
        otherwise they are accepted and ignored.
        """
        if not self.settings.DISCOVERY_APPLY_FILTERS:
            destination = start_date = end_date = None
        elif destination is not None:
            destination = destination.strip() or None

        rows = self.repo.search_active(
            session,
            exclude_user_id=user_id,
            destination=destination,
            start_date=start_date,
            end_date=end_date,
        )
        return [
            TravelPlanWithOwner(
                **plan.model_dump(),
                user=UserRead.model_validate(owner),
            )
            for plan, owner in rows
        ]

    # -------- Mutations --------

    def create_plan(
        self,
        session: Session,
        user_id: str,
        payload: TravelPlanCreate,
    ) -> TravelPlan:
        plan = TravelPlan(user_id=user_id, **payload.model_dump())
        plan = self.repo.create(session, plan)
        logger.info("Travel plan %s created by user %s", plan.id, user_id)
        return plan

    def update_plan(
        self,
        session: Session,
        user_id: str,
        plan_id: str,
        payload: TravelPlanUpdate,
    ) -> TravelPlan:
        """
        Partial update by the owner.

        Raises:
            HTTPException(404): plan does not exist.
            HTTPException(403): plan belongs to someone else.
            HTTPException(400): resulting end_date < start_date.
        """
        plan = self._get_owned_plan(session, user_id, plan_id, action="update")

        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key not in NON_NULLABLE_FIELDS
        }

        start = updates.get("start_date", plan.start_date)
        end = updates.get("end_date", plan.end_date)
        if end < start:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="endDate must be on or after startDate",
            )

        return self.repo.update(session, plan, updates)

    def delete_plan(self, session: Session, user_id: str, plan_id: str) -> None:
        """Soft-delete a plan owned by the caller."""
        self._get_owned_plan(session, user_id, plan_id, action="delete")

        if not self.repo.soft_delete(session, plan_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Travel plan not found",
            )
        logger.info("Travel plan %s deactivated by user %s", plan_id, user_id)

    # -------- Helpers --------

    def _get_owned_plan(
        self,
        session: Session,
        user_id: str,
        plan_id: str,
        action: str,
    ) -> TravelPlan:
        plan = self.get_plan(session, plan_id)
        if plan.user_id != user_id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Not authorized to {action} this travel plan",
            )
        return plan
