# app/repositories/message_repo.py
from sqlalchemy import or_
from sqlalchemy.orm import aliased
from sqlmodel import Session, select

from app.models.message import Message
from app.models.user import User


class MessageRepository:
    """
    Data access layer for messages.

    Threads are assembled with explicit joins against two aliases of
    the users table (one for the sender, one for the recipient).
    """

    def get_by_id(self, session: Session, message_id: str) -> Message | None:
        return session.get(Message, message_id)

    def create(self, session: Session, message: Message) -> Message:
        session.add(message)
        session.commit()
        session.refresh(message)
        return message

    def list_for_user(
        self,
        session: Session,
        user_id: str,
        counterpart_id: str | None = None,
    ) -> list[tuple[Message, User, User]]:
        """
        Messages the user sent or received, newest first.

        With a counterpart, only messages where the counterpart is also
        a participant (the two-party thread) are returned.
        """
        sender = aliased(User, name="sender")
        recipient = aliased(User, name="recipient")

        stmt = (
            select(Message, sender, recipient)
            .join(sender, Message.sender_id == sender.id)
            .join(recipient, Message.recipient_id == recipient.id)
            .where(
                or_(Message.sender_id == user_id, Message.recipient_id == user_id)
            )
        )
        if counterpart_id is not None:
            stmt = stmt.where(
                or_(
                    Message.sender_id == counterpart_id,
                    Message.recipient_id == counterpart_id,
                )
            )

        stmt = stmt.order_by(Message.created_at.desc())
        return session.exec(stmt).all()

    def mark_read(self, session: Session, message_id: str) -> bool:
        """
        Set is_read on a message.

        Returns True when the message exists, whether or not it was
        already read.
        """
        message = self.get_by_id(session, message_id)
        if message is None:
            return False
        if not message.is_read:
            message.is_read = True
            session.add(message)
            session.commit()
        return True
