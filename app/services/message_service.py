# app/services/message_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.message import Message
from app.repositories.message_repo import MessageRepository
from app.repositories.travel_plan_repo import TravelPlanRepository
from app.repositories.user_repo import UserRepository
from app.schemas.message import MessageCreate, MessageWithUsers
from app.schemas.user import UserRead

logger = logging.getLogger(__name__)


class MessageService:
    """
    Business logic for messages.

    Responsibilities:
      - assemble inbox / two-party threads with both profiles embedded
      - validate references before sending
      - mark messages read
    """

    def __init__(
        self,
        message_repo: MessageRepository,
        user_repo: UserRepository,
        plan_repo: TravelPlanRepository,
    ):
        self.message_repo = message_repo
        self.user_repo = user_repo
        self.plan_repo = plan_repo

    def list_messages(
        self,
        session: Session,
        user_id: str,
        counterpart_id: str | None = None,
    ) -> list[MessageWithUsers]:
        """
        Inbox (no counterpart) or the thread with one counterpart.

        A message a user sent to themselves is returned like any other.
        """
        rows = self.message_repo.list_for_user(session, user_id, counterpart_id)
        return [
            MessageWithUsers(
                **message.model_dump(),
                sender=UserRead.model_validate(sender),
                recipient=UserRead.model_validate(recipient),
            )
            for message, sender, recipient in rows
        ]

    def send_message(
        self,
        session: Session,
        sender_id: str,
        payload: MessageCreate,
    ) -> Message:
        """
        Store a new unread message from the caller.

        Raises:
            HTTPException(400): unknown recipient or travel plan.
        """
        if self.user_repo.get_by_id(session, payload.recipient_id) is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Recipient not found",
            )

        if (
            payload.travel_plan_id is not None
            and self.plan_repo.get_by_id(session, payload.travel_plan_id) is None
        ):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Travel plan not found",
            )

        message = Message(sender_id=sender_id, **payload.model_dump())
        message = self.message_repo.create(session, message)
        logger.info(
            "Message %s sent from %s to %s", message.id, sender_id, message.recipient_id
        )
        return message

    def mark_read(self, session: Session, message_id: str) -> None:
        """
        Raises:
            HTTPException(404): if the message does not exist.
        """
        if not self.message_repo.mark_read(session, message_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Message not found",
            )
