# app/routers/matches.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import require_auth
from app.database import get_session
from app.models.user import User
from app.repositories.match_repo import MatchRepository
from app.schemas.match import MatchCreate, MatchRead
from app.services.match_service import MatchService

router = APIRouter(prefix="/matches", tags=["Matches"])

repo = MatchRepository()
service = MatchService(repo)


@router.get("", response_model=list[MatchRead])
def list_my_matches(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """Matches the caller proposed or received."""
    return service.list_matches(session, current_user.id)


@router.post(
    "",
    response_model=MatchRead,
    status_code=status.HTTP_201_CREATED,
)
def create_match(
    payload: MatchCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Propose a match between the caller's plan and another user's plan.

    The new match is always 'pending'.
    """
    return service.create_match(session, current_user.id, payload)
