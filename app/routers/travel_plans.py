# app/routers/travel_plans.py
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_auth
from app.database import get_session
from app.models.user import User
from app.repositories.travel_plan_repo import TravelPlanRepository
from app.schemas.common import StatusMessage
from app.schemas.travel_plan import (
    TravelPlanCreate,
    TravelPlanRead,
    TravelPlanUpdate,
)
from app.services.travel_plan_service import TravelPlanService

router = APIRouter(prefix="/travel-plans", tags=["Travel plans"])

repo = TravelPlanRepository()
service = TravelPlanService(repo)


@router.get("", response_model=None)
def list_travel_plans(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
    search: str | None = None,
    destination: str | None = None,
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
):
    """
    Two views on the same collection:

      - ?search=discover : other users' active plans with their owner
        (optionally filtered by destination / startDate / endDate)
      - otherwise        : the caller's own active plans
    """
    if search == "discover":
        return service.discover(
            session,
            current_user.id,
            destination=destination,
            start_date=start_date,
            end_date=end_date,
        )
    return service.list_own(session, current_user.id)


@router.get("/{plan_id}", response_model=TravelPlanRead)
def get_travel_plan(
    plan_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Get a single plan by id.

    Soft-deleted plans are still returned (with is_active = false) so
    messages and matches pointing at them can be resolved.
    """
    return service.get_plan(session, plan_id)


@router.post(
    "",
    response_model=TravelPlanRead,
    status_code=status.HTTP_201_CREATED,
)
def create_travel_plan(
    payload: TravelPlanCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """Create a travel plan owned by the caller."""
    return service.create_plan(session, current_user.id, payload)


@router.put("/{plan_id}", response_model=TravelPlanRead)
def update_travel_plan(
    plan_id: str,
    payload: TravelPlanUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Update a travel plan (owner only).

    404 if the plan does not exist, 403 if it belongs to someone else.
    """
    return service.update_plan(session, current_user.id, plan_id, payload)


@router.delete("/{plan_id}", response_model=StatusMessage)
def delete_travel_plan(
    plan_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Soft-delete a travel plan (owner only).

    The row is kept with is_active = false.
    """
    service.delete_plan(session, current_user.id, plan_id)
    return StatusMessage(message="Travel plan deleted successfully")
