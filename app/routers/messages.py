# app/routers/messages.py
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_auth
from app.database import get_session
from app.models.user import User
from app.repositories.message_repo import MessageRepository
from app.repositories.travel_plan_repo import TravelPlanRepository
from app.repositories.user_repo import UserRepository
from app.schemas.common import StatusMessage
from app.schemas.message import MessageCreate, MessageRead, MessageWithUsers
from app.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["Messages"])

message_repo = MessageRepository()
user_repo = UserRepository()
plan_repo = TravelPlanRepository()
service = MessageService(message_repo, user_repo, plan_repo)


@router.get("", response_model=list[MessageWithUsers])
def list_messages(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
    recipient_id: str | None = Query(default=None, alias="recipientId"),
):
    """
    The caller's inbox, or the two-party thread with `recipientId`.

    Newest first; each message embeds sender and recipient profiles.
    """
    return service.list_messages(session, current_user.id, recipient_id)


@router.post(
    "",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
)
def send_message(
    payload: MessageCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """Send a message from the caller."""
    return service.send_message(session, current_user.id, payload)


@router.put("/{message_id}/read", response_model=StatusMessage)
def mark_message_read(
    message_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """Mark a message as read. Repeating the call is harmless."""
    service.mark_read(session, message_id)
    return StatusMessage(message="Message marked as read")
